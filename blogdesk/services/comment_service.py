"""
评论服务
批量操作对每个 id 独立执行并返回成功条数：未知 id 直接跳过，
中途失败不会回滚已完成的部分。
"""
from datetime import datetime, time
from blogdesk.exceptions import ValidationError, NotFound
from blogdesk.models.base import new_id
from blogdesk.storage import get_collection
from blogdesk.utils.dates import now_iso, parse_iso, sort_key, utc_now

COMMENT_STATUSES = ('approved', 'pending', 'spam', 'trash')
BULK_ACTIONS = ('updateStatus', 'delete', 'flag', 'unflag')
DEFAULT_FLAG_REASONS = ['inappropriate']

EDITABLE_FIELDS = (
    'content', 'status', 'author', 'postTitle', 'parentId',
    'likes', 'dislikes', 'flagged', 'flagReasons',
)


class CommentService:

    @staticmethod
    def _collection():
        return get_collection('comments')

    @staticmethod
    def _check_status(status):
        if status not in COMMENT_STATUSES:
            raise ValidationError(f'Invalid status: {status}. Supported: {", ".join(COMMENT_STATUSES)}')

    # ---------- 查询 ----------

    @staticmethod
    def get_all():
        comments = CommentService._collection().all()
        return sorted(comments, key=lambda c: sort_key(c.get('createdAt')), reverse=True)

    @staticmethod
    def get_by_id(comment_id):
        return CommentService._collection().get(comment_id)

    @staticmethod
    def get_by_post(post_id):
        return [c for c in CommentService.get_all() if c.get('postId') == post_id]

    @staticmethod
    def get_by_status(status):
        return [c for c in CommentService.get_all() if c.get('status') == status]

    @staticmethod
    def get_approved():
        return CommentService.get_by_status('approved')

    @staticmethod
    def get_pending():
        return CommentService.get_by_status('pending')

    @staticmethod
    def get_flagged():
        return [c for c in CommentService.get_all() if c.get('flagged')]

    @staticmethod
    def search(query):
        """按内容、作者名、作者邮箱、文章标题模糊搜索 (不区分大小写)"""
        query = (query or '').lower()
        results = []
        for comment in CommentService.get_all():
            author = comment.get('author') or {}
            haystack = (
                comment.get('content'), author.get('name'),
                author.get('email'), comment.get('postTitle'),
            )
            if any(query in (value or '').lower() for value in haystack):
                results.append(comment)
        return results

    @staticmethod
    def get_stats():
        comments = CommentService._collection().all()
        today = datetime.combine(utc_now().date(), time.min)
        post_count = get_collection('posts').count()
        stats = {'total': len(comments)}
        for status in COMMENT_STATUSES:
            stats[status] = sum(1 for c in comments if c.get('status') == status)
        stats['todayCount'] = sum(
            1 for c in comments if (parse_iso(c.get('createdAt')) or datetime.min) >= today
        )
        stats['averagePerPost'] = round(len(comments) / max(post_count, 1), 1)
        return stats

    # ---------- 单条写入 ----------

    @staticmethod
    def create(data):
        for field in ('postId', 'author', 'content'):
            if not data.get(field):
                raise ValidationError(f'{field} is required')

        author = data['author']
        if isinstance(author, str):
            author = {'name': author}
        elif isinstance(author, dict):
            author = dict(author)
        else:
            raise ValidationError('author must be a name or an object')
        author.setdefault('email', '')
        author.setdefault('isRegistered', False)

        status = data.get('status') or 'pending'
        CommentService._check_status(status)

        post_title = data.get('postTitle')
        if not post_title:
            post = get_collection('posts').get(data['postId'])
            post_title = post['title'] if post else ''

        now = now_iso()
        comment = {
            'id': new_id(),
            'postId': data['postId'],
            'postTitle': post_title,
            'author': author,
            'content': data['content'],
            'status': status,
            'parentId': data.get('parentId'),
            'likes': 0,
            'dislikes': 0,
            'isEdited': False,
            'ipAddress': data.get('ipAddress') or '127.0.0.1',
            'userAgent': data.get('userAgent') or 'Unknown',
            'flagged': False,
            'flagReasons': [],
            'createdAt': now,
            'updatedAt': now,
        }
        return CommentService._collection().insert(comment)

    @staticmethod
    def update(comment_id, updates):
        """合并可编辑字段并刷新 updatedAt；不存在时返回 None"""
        collection = CommentService._collection()
        comment = collection.get(comment_id)
        if comment is None:
            return None
        changes = {k: v for k, v in updates.items() if k in EDITABLE_FIELDS}
        if 'status' in changes:
            CommentService._check_status(changes['status'])
        if 'content' in changes and changes['content'] != comment.get('content'):
            changes['isEdited'] = True
        comment.update(changes)
        comment['updatedAt'] = now_iso()
        return collection.put(comment)

    @staticmethod
    def update_status(comment_id, status):
        CommentService._check_status(status)
        return CommentService.update(comment_id, {'status': status})

    @staticmethod
    def delete(comment_id):
        return CommentService._collection().delete(comment_id)

    @staticmethod
    def flag(comment_id, reasons=None):
        return CommentService.update(comment_id, {'flagged': True, 'flagReasons': list(reasons or [])})

    @staticmethod
    def unflag(comment_id):
        return CommentService.update(comment_id, {'flagged': False, 'flagReasons': []})

    @staticmethod
    def add_like(comment_id):
        comment = CommentService.get_by_id(comment_id)
        if comment is None:
            raise NotFound('Comment not found')
        return CommentService.update(comment_id, {'likes': (comment.get('likes') or 0) + 1})

    @staticmethod
    def add_dislike(comment_id):
        comment = CommentService.get_by_id(comment_id)
        if comment is None:
            raise NotFound('Comment not found')
        return CommentService.update(comment_id, {'dislikes': (comment.get('dislikes') or 0) + 1})

    # ---------- 批量操作 ----------

    @staticmethod
    def bulk_update_status(ids, status):
        CommentService._check_status(status)
        return sum(1 for cid in ids if CommentService.update(cid, {'status': status}) is not None)

    @staticmethod
    def bulk_delete(ids):
        return sum(1 for cid in ids if CommentService.delete(cid))

    @staticmethod
    def bulk_flag(ids, reasons=None):
        return sum(1 for cid in ids if CommentService.flag(cid, reasons) is not None)

    @staticmethod
    def bulk_unflag(ids):
        return sum(1 for cid in ids if CommentService.unflag(cid) is not None)

    @staticmethod
    def bulk_action(action, ids, status=None, flag_reasons=None):
        """
        按 action 分发批量操作
        返回 (结果键, 成功条数)，例如 ('deleted', 2)
        """
        if action == 'updateStatus':
            if not status:
                raise ValidationError('Status is required for updateStatus action')
            return 'updated', CommentService.bulk_update_status(ids, status)
        if action == 'delete':
            return 'deleted', CommentService.bulk_delete(ids)
        if action == 'flag':
            return 'flagged', CommentService.bulk_flag(ids, flag_reasons or DEFAULT_FLAG_REASONS)
        if action == 'unflag':
            return 'unflagged', CommentService.bulk_unflag(ids)
        raise ValidationError(f'Invalid action. Supported: {", ".join(BULK_ACTIONS)}')
