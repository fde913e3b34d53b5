from datetime import datetime, timezone


def utc_now():
    """当前 UTC 时间 (naive)，与数据库 DateTime 列保持一致"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_iso(value):
    """datetime -> '2024-01-15T10:00:00.000Z'"""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec='milliseconds') + 'Z'


def now_iso():
    return to_iso(utc_now())


def parse_iso(value):
    """ISO 字符串 -> naive UTC datetime；无法解析时返回 None"""
    if not value:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
        except ValueError:
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def sort_key(value):
    """排序用：缺失的时间排在最前"""
    return parse_iso(value) or datetime.min


def _plural(n, unit):
    return f"{n} {unit}{'s' if n > 1 else ''} ago"


def relative_time(value, now=None):
    """'Just now' / '5 minutes ago' / '2 days ago'，超过一周返回日期"""
    moment = parse_iso(value)
    if moment is None:
        return ''
    seconds = int(((now or utc_now()) - moment).total_seconds())
    if seconds < 60:
        return 'Just now'
    if seconds < 3600:
        return _plural(seconds // 60, 'minute')
    if seconds < 86400:
        return _plural(seconds // 3600, 'hour')
    if seconds < 604800:
        return _plural(seconds // 86400, 'day')
    return moment.date().isoformat()
