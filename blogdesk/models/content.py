from blogdesk.extensions import db
from .base import BaseModel


class Category(BaseModel):
    """文章分类"""
    __tablename__ = 'blog_categories'
    FIELD_MAP = {
        'name': 'name',
        'slug': 'slug',
        'description': 'description',
        'color': 'color',
        'postCount': 'post_count',
    }

    name = db.Column(db.String(128), nullable=False)
    slug = db.Column(db.String(128), unique=True, index=True)
    description = db.Column(db.Text, default='')
    color = db.Column(db.String(16), default='#3B82F6')
    post_count = db.Column(db.Integer, default=0)

    def __repr__(self):
        return f'<Category {self.slug}>'


class Post(BaseModel):
    """博客文章"""
    __tablename__ = 'blog_posts'
    FIELD_MAP = {
        'title': 'title',
        'slug': 'slug',
        'excerpt': 'excerpt',
        'content': 'content',
        'status': 'status',
        'featured': 'featured',
        'categoryId': 'category_id',
        'categoryName': 'category_name',
        'tags': 'tags',
        'seoTitle': 'seo_title',
        'seoDescription': 'seo_description',
        'seoKeywords': 'seo_keywords',
        'featuredImage': 'featured_image',
        'author': 'author',
        'views': 'views',
        'readingTime': 'reading_time',
        'publishedAt': 'published_at',
    }

    title = db.Column(db.String(256), nullable=False)
    slug = db.Column(db.String(256), unique=True, index=True)
    excerpt = db.Column(db.Text, default='')
    content = db.Column(db.Text, default='')  # Markdown 原文
    status = db.Column(db.String(20), default='draft', index=True)  # draft, published, archived
    featured = db.Column(db.Boolean, default=False)

    # 分类引用不加外键：删除分类后文章保留悬空引用
    category_id = db.Column(db.String(64), index=True)
    category_name = db.Column(db.String(128))

    tags = db.Column(db.JSON, default=list)
    seo_title = db.Column(db.String(256))
    seo_description = db.Column(db.Text)
    seo_keywords = db.Column(db.JSON, default=list)
    featured_image = db.Column(db.JSON)  # {url, altText, caption}
    author = db.Column(db.JSON)  # {id, name}

    views = db.Column(db.Integer, default=0)
    reading_time = db.Column(db.Integer, default=1)
    published_at = db.Column(db.DateTime, index=True)

    def __repr__(self):
        return f'<Post {self.slug}>'


class Comment(BaseModel):
    """文章评论"""
    __tablename__ = 'blog_comments'
    FIELD_MAP = {
        'postId': 'post_id',
        'postTitle': 'post_title',
        'author': 'author',
        'content': 'content',
        'status': 'status',
        'parentId': 'parent_id',
        'likes': 'likes',
        'dislikes': 'dislikes',
        'isEdited': 'is_edited',
        'ipAddress': 'ip_address',
        'userAgent': 'user_agent',
        'flagged': 'flagged',
        'flagReasons': 'flag_reasons',
    }

    post_id = db.Column(db.String(64), index=True)
    post_title = db.Column(db.String(256))
    author = db.Column(db.JSON)  # {name, email, website, avatar, isRegistered}
    content = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), default='pending', index=True)  # pending, approved, spam, trash
    parent_id = db.Column(db.String(64))

    likes = db.Column(db.Integer, default=0)
    dislikes = db.Column(db.Integer, default=0)
    is_edited = db.Column(db.Boolean, default=False)
    ip_address = db.Column(db.String(64))
    user_agent = db.Column(db.String(256))

    flagged = db.Column(db.Boolean, default=False, index=True)
    flag_reasons = db.Column(db.JSON, default=list)
