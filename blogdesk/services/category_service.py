from collections import Counter
from blogdesk.exceptions import ValidationError, NotFound
from blogdesk.models.base import new_id
from blogdesk.storage import get_collection
from blogdesk.utils.dates import now_iso
from blogdesk.utils.text import slugify

DEFAULT_COLOR = '#3B82F6'
EDITABLE_FIELDS = ('name', 'slug', 'description', 'color')


class CategoryService:

    @staticmethod
    def _collection():
        return get_collection('categories')

    @staticmethod
    def recompute_post_counts():
        """
        重新扫描全部文章统计已发布数量并覆盖每个分类的 postCount。
        优先按 categoryId 计数；按 id 计不到时用 categoryName 派生的 slug 匹配。
        """
        collection = CategoryService._collection()
        categories = collection.all()
        by_id = Counter()
        by_slug = Counter()
        for post in get_collection('posts').all():
            if post.get('status') != 'published':
                continue
            if post.get('categoryId'):
                by_id[post['categoryId']] += 1
            if post.get('categoryName'):
                by_slug[slugify(post['categoryName'])] += 1

        for category in categories:
            category['postCount'] = by_id[category['id']] or by_slug[category.get('slug')] or 0
        if categories:
            collection.save_many(categories)
        return categories

    @staticmethod
    def get_all():
        categories = CategoryService.recompute_post_counts()
        return sorted(categories, key=lambda c: (c.get('name') or '').lower())

    @staticmethod
    def get_by_id(category_id):
        return CategoryService._collection().get(category_id)

    @staticmethod
    def get_by_slug(slug):
        return next((c for c in CategoryService._collection().all() if c.get('slug') == slug), None)

    @staticmethod
    def _ensure_unique_slug(slug, exclude_id=None):
        for category in CategoryService._collection().all():
            if category.get('slug') == slug and category['id'] != exclude_id:
                raise ValidationError(f'Category with slug "{slug}" already exists')

    @staticmethod
    def create(data):
        name = (data.get('name') or '').strip()
        if not name:
            raise ValidationError('Category name is required')
        slug = slugify(data.get('slug') or name)
        if not slug:
            raise ValidationError('Category name must contain letters or numbers')
        CategoryService._ensure_unique_slug(slug)

        now = now_iso()
        category = {
            'id': new_id(),
            'name': name,
            'slug': slug,
            'description': data.get('description') or '',
            'color': data.get('color') or DEFAULT_COLOR,
            'postCount': 0,
            'createdAt': now,
            'updatedAt': now,
        }
        return CategoryService._collection().insert(category)

    @staticmethod
    def update(category_id, updates):
        collection = CategoryService._collection()
        category = collection.get(category_id)
        if category is None:
            raise NotFound('Category not found')

        changes = {k: v for k, v in updates.items() if k in EDITABLE_FIELDS}
        if 'name' in changes:
            changes['name'] = (changes['name'] or '').strip()
            if not changes['name']:
                raise ValidationError('Category name is required')
            # 改名且未显式给出 slug 时重新生成
            if 'slug' not in changes:
                changes['slug'] = changes['name']
        if 'slug' in changes:
            changes['slug'] = slugify(changes['slug'])
            if not changes['slug']:
                raise ValidationError('Category slug cannot be empty')
            CategoryService._ensure_unique_slug(changes['slug'], exclude_id=category_id)

        category.update(changes)
        category['updatedAt'] = now_iso()
        return collection.put(category)

    @staticmethod
    def delete(category_id):
        """删除分类；引用它的文章保留原有 categoryId"""
        if not CategoryService._collection().delete(category_id):
            raise NotFound('Category not found')
        return True
