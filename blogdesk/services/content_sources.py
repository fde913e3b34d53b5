"""
前台站点内容来源
store: 进程内直接读取后台数据
admin_api: 通过 httpx 拉取后台 JSON API，失败时回退到本地 Markdown 文件
"""
import os
from datetime import date, datetime
import yaml
import httpx
from flask import current_app
from blogdesk.services.category_service import CategoryService
from blogdesk.services.post_service import PostService
from blogdesk.utils.markdown_helper import parse_front_matter
from blogdesk.utils.dates import to_iso
from blogdesk.utils.text import slugify, reading_time, normalize_tags

DEFAULT_COVER_IMAGE = '/images/blog/default.jpg'
SUMMARY_LENGTH = 200
SEO_DESCRIPTION_LENGTH = 160


def _summary(content, length):
    content = content or ''
    return content[:length] + '...' if len(content) > length else content


def format_public_post(post):
    """后台文章记录 -> 前台展示结构"""
    content = post.get('content') or ''
    excerpt = post.get('excerpt') or _summary(content, SUMMARY_LENGTH)
    image = post.get('featuredImage') or {}
    author = post.get('author') or {}
    if isinstance(author, str):
        author = {'name': author}
    category_name = post.get('categoryName') or 'General'
    return {
        'id': post.get('id'),
        'slug': post.get('slug') or 'untitled',
        'title': post.get('title') or 'Untitled',
        'description': excerpt,
        'excerpt': excerpt,
        'content': content,
        'date': post.get('publishedAt') or post.get('createdAt'),
        'published': post.get('status') == 'published',
        'featured': bool(post.get('featured')),
        'author': {'name': author.get('name') or 'Admin'},
        'category': slugify(category_name) or 'general',
        'categoryName': category_name,
        'tags': list(post.get('tags') or []),
        'coverImage': image.get('url') or DEFAULT_COVER_IMAGE,
        'readingTime': reading_time(content),
        'views': post.get('views') or 0,
        'seo': {
            'title': post.get('seoTitle') or post.get('title') or 'Untitled',
            'description': post.get('seoDescription') or _summary(content, SEO_DESCRIPTION_LENGTH),
            'keywords': list(post.get('seoKeywords') or []),
        },
    }


def _truthy(value, default):
    if isinstance(value, bool):
        return value
    if value in (None, ''):
        return default
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def _meta_text(value):
    """YAML 元数据值 -> 字符串；日期转成 ISO 格式"""
    if value is None:
        return None
    if isinstance(value, datetime):
        return to_iso(value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


class StoreSource:
    """直接读取存储层 (与后台同进程)"""
    name = 'store'

    def posts(self):
        return [format_public_post(p) for p in PostService.get_published()]

    def categories(self):
        return CategoryService.get_all()

    def record_view(self, post):
        if post.get('id'):
            PostService.increment_views(post['id'])


class MarkdownSource:
    """
    读取目录中的 .md 文件 (带前置元数据) 作为文章
    支持的元数据：title, slug, date, description, category, tags, featured, published, coverimage, author
    """
    name = 'markdown'

    def __init__(self, directory):
        self.directory = directory

    def _read(self, filename):
        path = os.path.join(self.directory, filename)
        with open(path, 'r', encoding='utf-8') as fp:
            meta, body = parse_front_matter(fp.read())
        stem = filename.rsplit('.', 1)[0]
        title = _meta_text(meta.get('title')) or stem
        category_name = _meta_text(meta.get('category')) or 'General'
        description = _meta_text(meta.get('description')) or _summary(body, SUMMARY_LENGTH)
        return {
            'id': None,
            'slug': _meta_text(meta.get('slug')) or slugify(stem),
            'title': title,
            'description': description,
            'excerpt': description,
            'content': body,
            'date': _meta_text(meta.get('date')),
            'published': _truthy(meta.get('published'), True),
            'featured': _truthy(meta.get('featured'), False),
            'author': {'name': _meta_text(meta.get('author')) or 'Admin'},
            'category': slugify(category_name),
            'categoryName': category_name,
            'tags': normalize_tags(meta.get('tags')),
            'coverImage': _meta_text(meta.get('coverimage')) or DEFAULT_COVER_IMAGE,
            'readingTime': reading_time(body),
            'views': 0,
            'seo': {
                'title': title,
                'description': description[:SEO_DESCRIPTION_LENGTH],
                'keywords': normalize_tags(meta.get('tags')),
            },
        }

    def posts(self):
        if not self.directory or not os.path.isdir(self.directory):
            return []
        posts = []
        for filename in sorted(os.listdir(self.directory)):
            if not filename.endswith(('.md', '.mdx')):
                continue
            try:
                post = self._read(filename)
            except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
                current_app.logger.warning(f'跳过无法读取的文章文件 {filename}: {e}')
                continue
            if post['published']:
                posts.append(post)
        return posts

    def categories(self):
        seen = {}
        for post in self.posts():
            seen.setdefault(post['category'], {
                'id': post['category'],
                'name': post['categoryName'],
                'slug': post['category'],
                'description': '',
            })
        return list(seen.values())

    def record_view(self, post):
        pass


class AdminApiSource:
    """通过 HTTP 读取后台 API；请求失败或返回 success=false 时使用 fallback"""
    name = 'admin_api'

    def __init__(self, base_url, timeout=5.0, fallback=None, transport=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.fallback = fallback
        self._transport = transport
        self._client = None

    def _get_client(self):
        if self._client is None:
            self._client = httpx.Client(base_url=self.base_url, timeout=self.timeout,
                                        transport=self._transport)
        return self._client

    def _fetch(self, endpoint, params=None):
        try:
            response = self._get_client().get(endpoint, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException:
            current_app.logger.warning(f'后台 API 超时: {endpoint}')
            return None
        except httpx.HTTPError as e:
            current_app.logger.warning(f'后台 API 请求失败 {endpoint}: {e}')
            return None
        except ValueError:
            current_app.logger.warning(f'后台 API 返回的不是 JSON: {endpoint}')
            return None
        if not isinstance(data, dict) or not data.get('success'):
            current_app.logger.warning(f'后台 API 返回错误 {endpoint}: {data.get("error") if isinstance(data, dict) else data}')
            return None
        return data

    def posts(self):
        data = self._fetch('/api/posts', params={'status': 'published'})
        if data and isinstance(data.get('posts'), list):
            return [format_public_post(p) for p in data['posts']]
        current_app.logger.info('使用本地 Markdown 文章作为回退')
        return self.fallback.posts() if self.fallback else []

    def categories(self):
        data = self._fetch('/api/categories')
        if data and isinstance(data.get('categories'), list):
            return data['categories']
        return self.fallback.categories() if self.fallback else []

    def record_view(self, post):
        pass


def build_content_source(app):
    source = app.config.get('SITE_CONTENT_SOURCE', 'store')
    if source == 'store':
        return StoreSource()
    fallback = MarkdownSource(app.config.get('SITE_CONTENT_DIR'))
    if source == 'admin_api':
        return AdminApiSource(app.config['ADMIN_API_URL'], app.config.get('ADMIN_API_TIMEOUT', 5.0),
                              fallback=fallback)
    if source == 'markdown':
        return fallback
    raise ValueError(f'Unknown SITE_CONTENT_SOURCE: {source}')


def get_content_source():
    """每个应用缓存一个来源实例 (复用 httpx 客户端)"""
    if 'blog_site_source' not in current_app.extensions:
        current_app.extensions['blog_site_source'] = build_content_source(current_app)
    return current_app.extensions['blog_site_source']
