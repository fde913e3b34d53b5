from flask import has_request_context
from flask_login import current_user
from blogdesk.exceptions import ValidationError, NotFound
from blogdesk.models.base import new_id
from blogdesk.storage import get_collection
from blogdesk.storage.defaults import DEFAULT_AUTHOR
from blogdesk.utils.dates import now_iso, sort_key
from blogdesk.utils.text import slugify, reading_time, make_excerpt, normalize_tags

POST_STATUSES = ('draft', 'published', 'archived')

EDITABLE_FIELDS = (
    'title', 'slug', 'excerpt', 'content', 'status', 'featured',
    'categoryId', 'categoryName', 'tags', 'seoTitle', 'seoDescription',
    'seoKeywords', 'featuredImage', 'author',
)


def _newest_first(posts, field='createdAt'):
    return sorted(posts, key=lambda p: sort_key(p.get(field)), reverse=True)


class PostService:

    @staticmethod
    def _collection():
        return get_collection('posts')

    # ---------- 查询 ----------

    @staticmethod
    def get_all():
        return _newest_first(PostService._collection().all())

    @staticmethod
    def get_by_id(post_id):
        return PostService._collection().get(post_id)

    @staticmethod
    def get_by_slug(slug):
        return next((p for p in PostService._collection().all() if p.get('slug') == slug), None)

    @staticmethod
    def get_by_id_or_slug(key):
        """先按 id 查找，再按 slug 查找"""
        return PostService.get_by_id(key) or PostService.get_by_slug(key)

    @staticmethod
    def get_published():
        posts = [p for p in PostService._collection().all() if p.get('status') == 'published']
        return _newest_first(posts, 'publishedAt')

    @staticmethod
    def get_featured():
        return [p for p in PostService.get_published() if p.get('featured')]

    @staticmethod
    def list_posts(status=None, category=None, tag=None, featured=False, search=None, limit=None):
        """后台文章列表筛选"""
        if status == 'published':
            posts = PostService.get_published()
        elif status == 'featured':
            posts = PostService.get_featured()
        else:
            posts = PostService.get_all()
            if status and status != 'all':
                posts = [p for p in posts if p.get('status') == status]

        if category:
            posts = [p for p in posts
                     if p.get('categoryId') == category or slugify(p.get('categoryName')) == category]
        if tag:
            tag = tag.lower()
            posts = [p for p in posts if tag in (p.get('tags') or [])]
        if featured:
            posts = [p for p in posts if p.get('featured')]
        if search:
            query = search.lower()
            posts = [p for p in posts
                     if query in (p.get('title') or '').lower()
                     or query in (p.get('excerpt') or '').lower()
                     or query in (p.get('content') or '').lower()]
        if limit is not None and limit >= 0:
            posts = posts[:limit]
        return posts

    # ---------- 写入 ----------

    @staticmethod
    def _unique_slug(base, exclude_id=None):
        """slug 冲突时追加 -2, -3 ..."""
        taken = {p.get('slug') for p in PostService._collection().all() if p['id'] != exclude_id}
        candidate = base
        n = 2
        while candidate in taken:
            candidate = f'{base}-{n}'
            n += 1
        return candidate

    @staticmethod
    def _category_name(category_id):
        category = get_collection('categories').get(category_id) if category_id else None
        return category['name'] if category else None

    @staticmethod
    def _current_author():
        if has_request_context() and current_user.is_authenticated:
            return {'id': current_user.id, 'name': current_user.name}
        return dict(DEFAULT_AUTHOR)

    @staticmethod
    def _check_status(status):
        if status not in POST_STATUSES:
            raise ValidationError(f'Invalid status: {status}')

    @staticmethod
    def create(data):
        title = (data.get('title') or '').strip()
        if not title:
            raise ValidationError('Title is required')
        base_slug = slugify(data.get('slug') or title)
        if not base_slug:
            raise ValidationError('Title must contain letters or numbers')

        status = data.get('status') or 'draft'
        PostService._check_status(status)

        content = data.get('content') or ''
        category_id = data.get('categoryId') or None
        now = now_iso()
        post = {
            'id': new_id(),
            'title': title,
            'slug': PostService._unique_slug(base_slug),
            'excerpt': data.get('excerpt') or make_excerpt(content),
            'content': content,
            'status': status,
            'featured': bool(data.get('featured', False)),
            'categoryId': category_id,
            'categoryName': PostService._category_name(category_id) or data.get('categoryName') or '',
            'tags': normalize_tags(data.get('tags')),
            'seoTitle': data.get('seoTitle') or title,
            'seoDescription': data.get('seoDescription') or '',
            'seoKeywords': normalize_tags(data.get('seoKeywords')),
            'featuredImage': data.get('featuredImage'),
            'author': data.get('author') or PostService._current_author(),
            'views': 0,
            'readingTime': reading_time(content),
            'publishedAt': now if status == 'published' else None,
            'createdAt': now,
            'updatedAt': now,
        }
        return PostService._collection().insert(post)

    @staticmethod
    def update(post_id, updates):
        collection = PostService._collection()
        post = collection.get(post_id)
        if post is None:
            raise NotFound('Post not found')

        changes = {k: v for k, v in updates.items() if k in EDITABLE_FIELDS}
        if 'title' in changes:
            changes['title'] = (changes['title'] or '').strip()
            if not changes['title']:
                raise ValidationError('Title is required')
            if 'slug' not in changes and changes['title'] != post.get('title'):
                changes['slug'] = changes['title']
        if 'slug' in changes:
            base_slug = slugify(changes['slug'])
            if not base_slug:
                raise ValidationError('Slug cannot be empty')
            changes['slug'] = PostService._unique_slug(base_slug, exclude_id=post_id)
        if 'status' in changes:
            PostService._check_status(changes['status'])
            # 首次进入 published 时记录发布时间
            if changes['status'] == 'published' and post.get('status') != 'published':
                changes['publishedAt'] = now_iso()
        if 'tags' in changes:
            changes['tags'] = normalize_tags(changes['tags'])
        if 'seoKeywords' in changes:
            changes['seoKeywords'] = normalize_tags(changes['seoKeywords'])
        if 'featured' in changes:
            changes['featured'] = bool(changes['featured'])
        if 'content' in changes:
            changes['content'] = changes['content'] or ''
            changes['readingTime'] = reading_time(changes['content'])
        if 'categoryId' in changes and 'categoryName' not in changes:
            changes['categoryName'] = PostService._category_name(changes['categoryId']) or ''

        post.update(changes)
        post['updatedAt'] = now_iso()
        return collection.put(post)

    @staticmethod
    def delete(post_id):
        if not PostService._collection().delete(post_id):
            raise NotFound('Post not found')
        return True

    @staticmethod
    def increment_views(post_id):
        """阅读数 +1，不更新 updatedAt"""
        collection = PostService._collection()
        post = collection.get(post_id)
        if post is None:
            raise NotFound('Post not found')
        post['views'] = (post.get('views') or 0) + 1
        return collection.put(post)
