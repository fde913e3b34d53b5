"""
后台统计服务
所有数字都来自存储中的真实记录：阅读数取文章的 views，
时间序列按 createdAt / publishedAt 落到每一天。
"""
from collections import Counter
from datetime import timedelta
from blogdesk.exceptions import ValidationError
from blogdesk.storage import get_collection
from blogdesk.utils.dates import parse_iso, relative_time, sort_key, utc_now
from blogdesk.utils.text import slugify

RANGES = {'7d': 7, '30d': 30, '90d': 90}
DEFAULT_RANGE = '30d'
TOP_POSTS_COUNT = 5
TOP_CATEGORIES_COUNT = 5
RECENT_ACTIVITY_COUNT = 8


def _day(value):
    moment = parse_iso(value)
    return moment.date() if moment else None


def _growth(current, previous):
    """本期相对上一期的百分比变化，上一期为 0 时按 0 或 100 处理"""
    if previous == 0:
        return 100 if current else 0
    return round((current - previous) * 100 / previous)


class AnalyticsService:

    @staticmethod
    def range_days(range_key):
        if range_key in (None, ''):
            range_key = DEFAULT_RANGE
        if range_key not in RANGES:
            raise ValidationError(f'Invalid range. Supported: {", ".join(RANGES)}')
        return RANGES[range_key]

    @staticmethod
    def chart_data(posts, comments, days, today):
        """每天新建文章数、新评论数与当天发布文章的阅读数"""
        created = Counter(_day(p.get('createdAt')) for p in posts)
        published_views = Counter()
        for post in posts:
            if post.get('status') == 'published':
                published_views[_day(post.get('publishedAt'))] += post.get('views') or 0
        commented = Counter(_day(c.get('createdAt')) for c in comments)

        series = []
        for offset in range(days - 1, -1, -1):
            day = today - timedelta(days=offset)
            series.append({
                'date': day.isoformat(),
                'posts': created[day],
                'comments': commented[day],
                'views': published_views[day],
            })
        return series

    @staticmethod
    def top_posts(posts, limit=TOP_POSTS_COUNT):
        ranked = sorted(posts, key=lambda p: p.get('views') or 0, reverse=True)
        return [{
            'id': p['id'],
            'title': p.get('title'),
            'views': p.get('views') or 0,
            'status': p.get('status'),
            'category': p.get('categoryName') or 'Uncategorized',
        } for p in ranked[:limit]]

    @staticmethod
    def top_categories(posts, categories, limit=TOP_CATEGORIES_COUNT):
        """已发布文章按分类汇总：先按 categoryId，找不到时按分类名 slug"""
        by_id = {c['id']: c for c in categories}
        by_slug = {c.get('slug'): c for c in categories}
        stats = {c['id']: {'posts': 0, 'views': 0} for c in categories}
        for post in posts:
            if post.get('status') != 'published':
                continue
            category = by_id.get(post.get('categoryId')) or by_slug.get(slugify(post.get('categoryName')))
            if category is None:
                continue
            stats[category['id']]['posts'] += 1
            stats[category['id']]['views'] += post.get('views') or 0

        result = [{
            'id': c['id'],
            'name': c.get('name'),
            'color': c.get('color'),
            **stats[c['id']],
        } for c in categories]
        result.sort(key=lambda c: (c['views'], c['posts']), reverse=True)
        return result[:limit]

    @staticmethod
    def recent_activity(posts, categories, media_files, now, limit=RECENT_ACTIVITY_COUNT):
        events = []
        for post in posts:
            events.append((post.get('createdAt'), f"post_{post['id']}_created", 'post_created', post.get('title')))
            if post.get('status') == 'published' and post.get('publishedAt'):
                events.append((post['publishedAt'], f"post_{post['id']}_published", 'post_published', post.get('title')))
        for category in categories:
            events.append((category.get('createdAt'), f"category_{category['id']}_created", 'category_created',
                           category.get('name')))
        for media in media_files:
            events.append((media.get('uploadedAt'), f"media_{media['id']}_uploaded", 'media_uploaded',
                           media.get('originalName')))

        events.sort(key=lambda e: sort_key(e[0]), reverse=True)
        return [{
            'id': event_id,
            'type': kind,
            'title': title,
            'timestamp': stamp,
            'time': relative_time(stamp, now),
        } for stamp, event_id, kind, title in events[:limit]]

    @staticmethod
    def get_analytics(range_key=None):
        days = AnalyticsService.range_days(range_key)
        now = utc_now()
        today = now.date()

        posts = get_collection('posts').all()
        categories = get_collection('categories').all()
        comments = get_collection('comments').all()
        media_files = get_collection('media_files').all()
        published = [p for p in posts if p.get('status') == 'published']

        # 本期与上一期 (同样长度) 的对比
        window_start = today - timedelta(days=days - 1)
        previous_start = window_start - timedelta(days=days)
        previous_end = window_start - timedelta(days=1)

        def in_window(value, start, end):
            day = _day(value)
            return day is not None and start <= day <= end

        posts_now = sum(1 for p in posts if in_window(p.get('createdAt'), window_start, today))
        posts_before = sum(1 for p in posts if in_window(p.get('createdAt'), previous_start, previous_end))
        views_now = sum(p.get('views') or 0 for p in published
                        if in_window(p.get('publishedAt'), window_start, today))
        views_before = sum(p.get('views') or 0 for p in published
                           if in_window(p.get('publishedAt'), previous_start, previous_end))

        reading_times = [p.get('readingTime') or 0 for p in published]
        status_counts = Counter(c.get('status') for c in comments)

        return {
            'range': f'{days}d',
            'overview': {
                'totalViews': sum(p.get('views') or 0 for p in posts),
                'totalPosts': len(posts),
                'publishedPosts': len(published),
                'totalCategories': len(categories),
                'totalMedia': len(media_files),
                'approvedComments': status_counts['approved'],
                'pendingComments': status_counts['pending'],
                'viewsGrowth': _growth(views_now, views_before),
                'postsGrowth': _growth(posts_now, posts_before),
            },
            'chartData': AnalyticsService.chart_data(posts, comments, days, today),
            'topPosts': AnalyticsService.top_posts(posts),
            'topCategories': AnalyticsService.top_categories(posts, categories),
            'recentActivity': AnalyticsService.recent_activity(posts, categories, media_files, now),
            'performance': {
                'avgReadTime': round(sum(reading_times) / len(reading_times), 1) if reading_times else 0,
                'avgViewsPerPost': round(sum(p.get('views') or 0 for p in published) / len(published), 1)
                if published else 0,
            },
        }
