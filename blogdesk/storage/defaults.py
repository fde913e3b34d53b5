"""
内置种子数据
集合首次被读取 (local) 或数据库首次初始化 (database) 时写入
"""
from datetime import timedelta
from flask import current_app
from werkzeug.security import generate_password_hash
from blogdesk.utils.dates import utc_now, to_iso

DEFAULT_SETTINGS = {
    'general': {
        'siteName': '100lesme Blog',
        'siteDescription': 'A modern blog admin system built with Next.js',
        'siteUrl': 'https://100lesme-blog.com',
        'adminEmail': 'admin@100lesme-blog.com',
        'timezone': 'UTC',
        'language': 'en',
    },
    'appearance': {
        'theme': 'system',
        'primaryColor': '#3b82f6',
        'logo': '/logo.png',
        'favicon': '/favicon.ico',
    },
    'security': {
        'twoFactorEnabled': False,
        'passwordExpiry': 90,
        'maxLoginAttempts': 5,
        'sessionTimeout': 30,
    },
    'notifications': {
        'emailNotifications': True,
        'pushNotifications': False,
        'commentNotifications': True,
        'systemAlerts': True,
    },
    'backup': {
        'autoBackup': True,
        'backupFrequency': 'daily',
        'retentionDays': 30,
        'cloudBackup': False,
    },
}

DEFAULT_FOLDER_IDS = ('uploads', 'blog-images', 'documents')

# 种子账户的登录密码
SEED_CREDENTIALS = {
    'admin@example.com': 'admin123',
    'editor@example.com': 'editor123',
}

ROLE_PERMISSIONS = {
    'admin': ['all'],
    'editor': ['posts.create', 'posts.edit', 'posts.delete', 'posts.publish',
               'media.upload', 'media.delete', 'categories.manage'],
    'author': ['posts.create', 'posts.edit.own', 'posts.delete.own', 'media.upload'],
    'subscriber': ['posts.read', 'comments.create'],
}

DEFAULT_AUTHOR = {'id': 'admin-1', 'name': 'Admin User'}


def _ago(**kwargs):
    return to_iso(utc_now() - timedelta(**kwargs))


def default_categories():
    now = _ago()
    rows = [
        ('1', 'General', 'general', 'General blog posts', '#3B82F6'),
        ('2', 'Business', 'business', 'Business strategies, entrepreneurship, and industry insights', '#10B981'),
        ('3', 'Technology', 'technology', 'Posts about technology, programming, and software', '#6366F1'),
        ('4', 'Lifestyle', 'lifestyle', 'Lifestyle tips, personal development, and wellness', '#F59E0B'),
    ]
    return [
        {
            'id': cid, 'name': name, 'slug': slug, 'description': description,
            'color': color, 'postCount': 0, 'createdAt': now, 'updatedAt': now,
        }
        for cid, name, slug, description, color in rows
    ]


def default_posts():
    now = _ago()
    return [{
        'id': '1',
        'title': 'Welcome to Your Blog Admin',
        'slug': 'welcome-to-blog-admin',
        'excerpt': 'This is your first blog post created through the admin panel.',
        'content': (
            '# Welcome to Your Blog Admin\n\n'
            'This is your first blog post! You can now create, edit, and manage your content.\n\n'
            '## Getting Started\n\n'
            '1. Click "New Post" to create content\n'
            '2. Use the editor to write your posts\n'
            '3. Publish when ready\n\n'
            'Happy blogging!'
        ),
        'status': 'published',
        'featured': True,
        'categoryId': '1',
        'categoryName': 'General',
        'tags': ['welcome', 'admin', 'getting-started'],
        'seoTitle': 'Welcome to Your Blog Admin',
        'seoDescription': 'Learn how to use your new blog admin panel.',
        'seoKeywords': [],
        'featuredImage': None,
        'author': dict(DEFAULT_AUTHOR),
        'views': 42,
        'readingTime': 2,
        'publishedAt': now,
        'createdAt': now,
        'updatedAt': now,
    }]


def _comment(cid, author, content, status, ago, likes, dislikes, ip, agent, flag_reasons=()):
    created = _ago(minutes=ago)
    return {
        'id': cid,
        'postId': '1',
        'postTitle': 'Welcome to Your Blog Admin',
        'author': author,
        'content': content,
        'status': status,
        'parentId': None,
        'likes': likes,
        'dislikes': dislikes,
        'isEdited': False,
        'ipAddress': ip,
        'userAgent': agent,
        'flagged': bool(flag_reasons),
        'flagReasons': list(flag_reasons),
        'createdAt': created,
        'updatedAt': created,
    }


def default_comments():
    return [
        _comment('1', {
            'name': 'John Doe', 'email': 'john.doe@example.com', 'website': 'https://johndoe.com',
            'avatar': 'https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=40&h=40&fit=crop&crop=face',
            'isRegistered': True,
        }, 'Great article! Really helped me understand how to use the admin panel. The interface is '
           'very intuitive and user-friendly. Looking forward to more tutorials like this.',
            'approved', 120, 8, 0, '192.168.1.101',
            'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36'),
        _comment('2', {
            'name': 'Sarah Wilson', 'email': 'sarah.wilson@example.com',
            'avatar': 'https://images.unsplash.com/photo-1494790108755-2616b332e234?w=40&h=40&fit=crop&crop=face',
            'isRegistered': False,
        }, 'Thanks for sharing this! Could you also add a tutorial on how to customize the theme? '
           'That would be really helpful.',
            'approved', 240, 3, 0, '192.168.1.102',
            'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36'),
        _comment('3', {
            'name': 'Mike Chen', 'email': 'mike.chen@example.com', 'isRegistered': False,
        }, 'Quick question - is there a way to bulk import posts from another platform? '
           'Would save a lot of time during migration.',
            'pending', 30, 1, 0, '192.168.1.103',
            'Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36'),
        _comment('4', {
            'name': 'Emma Davis', 'email': 'emma.davis@example.com',
            'avatar': 'https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=40&h=40&fit=crop&crop=face',
            'isRegistered': True,
        }, 'Love the clean design! One suggestion: it would be great to have a dark mode option '
           'for the admin panel. Keep up the excellent work!',
            'approved', 360, 12, 1, '192.168.1.104',
            'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36'),
        _comment('5', {
            'name': 'SpamBot2024', 'email': 'spam@fakeemail.net', 'isRegistered': False,
        }, 'CHECK OUT MY AMAZING DEALS!!! Best prices on fake products at scamsite.com!!! '
           'Limited time offer, buy now and get 90% OFF everything!!! Click here: bit.ly/totalscam',
            'spam', 480, 0, 15, '192.168.1.666', 'Bot/SpamBot 2.0',
            flag_reasons=('spam', 'inappropriate_content', 'suspicious_links')),
    ]


def default_media_folders():
    now = _ago()
    rows = [
        ('uploads', 'Uploads', 'General uploads'),
        ('blog-images', 'Blog Images', 'Images for blog posts'),
        ('documents', 'Documents', 'PDF and document files'),
    ]
    return [
        {'id': fid, 'name': name, 'slug': fid, 'description': description,
         'mediaCount': 0, 'createdAt': now}
        for fid, name, description in rows
    ]


def _media(mid, filename, original, mime, size, dims, url, alt, caption, days, tags, folder):
    stamp = _ago(days=days)
    width, height = dims or (None, None)
    return {
        'id': mid, 'filename': filename, 'originalName': original, 'mimeType': mime,
        'size': size, 'width': width, 'height': height, 'url': url,
        'altText': alt, 'caption': caption, 'uploadedBy': 'admin', 'tags': tags,
        'folder': folder, 'uploadedAt': stamp, 'updatedAt': stamp,
    }


def default_media_files():
    return [
        _media('1', 'hero-workspace.jpg', 'Modern Workspace Hero.jpg', 'image/jpeg', 1024000, (1920, 1080),
               'https://images.unsplash.com/photo-1519389950473-47ba0277781c?w=1920&h=1080&fit=crop',
               'Modern workspace with laptop and coffee',
               'Beautiful modern workspace setup perfect for productivity',
               0, ['workspace', 'modern', 'productivity'], 'blog-images'),
        _media('2', 'blog-writing-cover.jpg', 'Blog Writing Cover.jpg', 'image/jpeg', 512000, (1200, 630),
               'https://images.unsplash.com/photo-1486312338219-ce68d2c6f44d?w=1200&h=630&fit=crop',
               'Person writing on laptop', 'The art of blog writing and content creation',
               1, ['writing', 'blog', 'content'], 'blog-images'),
        _media('3', 'team-collaboration.jpg', 'Team Collaboration.jpg', 'image/jpeg', 768000, (1600, 900),
               'https://images.unsplash.com/photo-1522071820081-009f0129c71c?w=1600&h=900&fit=crop',
               'Team working together at a table', 'Effective team collaboration in modern workplace',
               2, ['team', 'collaboration', 'workplace'], 'blog-images'),
        _media('4', 'sample-guide.pdf', 'Sample User Guide.pdf', 'application/pdf', 256000, None,
               'data:application/pdf;base64,JVBERi0xLjMKJf////8KMSAwIG9iago8PAovVHlwZSAvQ2F0YWxvZwovT3V0bGluZXMgMiAwIFIKL1BhZ2VzIDMgMCBSCj4+CmVuZG9iago=',
               'User guide document', 'Comprehensive user guide and documentation',
               3, ['guide', 'documentation', 'help'], 'documents'),
    ]


def _password_hash(email):
    password = SEED_CREDENTIALS.get(email)
    if not password:
        return None
    return generate_password_hash(password, method=current_app.config['PASSWORD_HASH_METHOD'])


def default_users():
    rows = [
        ('admin-1', 'John Admin', 'admin@example.com', 'admin',
         'https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=100',
         'System administrator and founder', 'https://johnadmin.com', 12, {}, 365),
        ('editor-1', 'Sarah Editor', 'editor@example.com', 'editor', None,
         'Content editor and strategist', None, 8, {'hours': 2}, 180),
        ('author-1', 'Mike Writer', 'mike@example.com', 'author', None,
         'Technology blogger and software developer', 'https://mikewriter.dev', 15, {'days': 1}, 90),
    ]
    return [
        {
            'id': uid, 'name': name, 'email': email, 'role': role, 'status': 'active',
            'avatar': avatar, 'bio': bio, 'website': website, 'postsCount': posts,
            'lastLogin': _ago(**last_login), 'createdAt': _ago(days=created_days),
            'permissions': list(ROLE_PERMISSIONS[role]), 'passwordHash': _password_hash(email),
        }
        for uid, name, email, role, avatar, bio, website, posts, last_login, created_days in rows
    ]
