"""
前台站点服务：只读取已发布内容
"""
import math
from collections import Counter
from flask import current_app
from blogdesk.exceptions import NotFound
from blogdesk.services.content_sources import get_content_source
from blogdesk.utils.dates import sort_key
from blogdesk.utils.markdown_helper import render_markdown
from blogdesk.utils.text import word_count, tag_slug

RELATED_POSTS_COUNT = 3
FEATURED_POSTS_COUNT = 3


class SiteService:

    @staticmethod
    def _posts():
        posts = get_content_source().posts()
        return sorted(posts, key=lambda p: sort_key(p.get('date')), reverse=True)

    @staticmethod
    def _find(slug):
        return next((p for p in SiteService._posts() if p['slug'] == slug), None)

    @staticmethod
    def list_posts(page=1, per_page=None):
        """分页文章列表"""
        per_page = per_page or current_app.config.get('POSTS_PER_PAGE', 12)
        page = max(page or 1, 1)
        posts = SiteService._posts()
        start = (page - 1) * per_page
        return {
            'posts': posts[start:start + per_page],
            'total': len(posts),
            'page': page,
            'perPage': per_page,
            'pages': math.ceil(len(posts) / per_page) if posts else 0,
        }

    @staticmethod
    def get_post(slug):
        post = SiteService._find(slug)
        if post is None:
            raise NotFound('Post not found')
        get_content_source().record_view(post)
        detail = dict(post)
        detail['html'] = render_markdown(post['content'])
        detail['wordCount'] = word_count(post['content'])
        return detail

    @staticmethod
    def featured_posts(limit=FEATURED_POSTS_COUNT):
        return [p for p in SiteService._posts() if p['featured']][:limit]

    @staticmethod
    def posts_by_category(slug):
        return [p for p in SiteService._posts() if p['category'] == slug]

    @staticmethod
    def posts_by_tag(slug):
        return [p for p in SiteService._posts() if any(tag_slug(t) == slug for t in p['tags'])]

    @staticmethod
    def related_posts(slug, limit=RELATED_POSTS_COUNT):
        """
        相关文章打分：同分类 +3，每个共同标签 +1；
        只保留得分大于 0 的文章，按得分从高到低取前 limit 篇。
        """
        posts = SiteService._posts()
        current = next((p for p in posts if p['slug'] == slug), None)
        if current is None:
            raise NotFound('Post not found')
        current_tags = set(current['tags'])
        scored = []
        for post in posts:
            if post['slug'] == slug:
                continue
            score = 3 if post['category'] == current['category'] else 0
            score += len(current_tags.intersection(post['tags']))
            if score > 0:
                scored.append((score, post))
        scored.sort(key=lambda item: item[0], reverse=True)
        return [post for _, post in scored[:limit]]

    @staticmethod
    def categories():
        """分类及其已发布文章数"""
        counts = Counter(p['category'] for p in SiteService._posts())
        result = []
        for category in get_content_source().categories():
            slug = category.get('slug') or 'unknown'
            result.append({
                'slug': slug,
                'name': category.get('name') or 'Unknown',
                'description': category.get('description') or '',
                'color': category.get('color'),
                'postCount': counts[slug],
            })
        return result

    @staticmethod
    def tags():
        """从已发布文章聚合标签"""
        counts = Counter()
        names = {}
        for post in SiteService._posts():
            for tag in post['tags']:
                slug = tag_slug(tag)
                counts[slug] += 1
                names.setdefault(slug, tag)
        tags = [{'name': names[slug], 'slug': slug, 'count': count} for slug, count in counts.items()]
        tags.sort(key=lambda t: (-t['count'], t['name']))
        return tags

    @staticmethod
    def search(query):
        query = (query or '').strip().lower()
        if not query:
            return []
        return [
            p for p in SiteService._posts()
            if query in p['title'].lower()
            or query in (p['description'] or '').lower()
            or query in p['content'].lower()
            or any(query in t.lower() for t in p['tags'])
        ]
