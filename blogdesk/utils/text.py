"""
文本派生工具
slug 生成、阅读时长、摘要与标签规范化
"""
import math
import re

WORDS_PER_MINUTE = 200
POST_EXCERPT_LENGTH = 160

_NON_ALNUM = re.compile(r'[^a-z0-9]+')


def slugify(text):
    """小写化，非字母数字连续段替换为单个 '-'，去掉首尾 '-'"""
    if not text:
        return ''
    return _NON_ALNUM.sub('-', str(text).lower()).strip('-')


def word_count(content):
    if not content:
        return 0
    return len(content.split())


def reading_time(content, wpm=WORDS_PER_MINUTE):
    """按每分钟 200 词估算阅读分钟数，最少 1 分钟"""
    return max(1, math.ceil(word_count(content) / wpm))


def make_excerpt(content, length=POST_EXCERPT_LENGTH):
    """截取纯文本摘要，去掉常见 Markdown 标记"""
    if not content:
        return ''
    text = re.sub(r'[#>*_`\[\]]', '', content)
    text = ' '.join(text.split())
    if len(text) <= length:
        return text
    return text[:length].rsplit(' ', 1)[0] + '...'


def normalize_tags(tags):
    """标签：去空白、小写、去重，保持原有顺序"""
    if isinstance(tags, str):
        tags = tags.split(',')
    result = []
    for tag in tags or []:
        tag = str(tag).strip().lower()
        if tag and tag not in result:
            result.append(tag)
    return result


def tag_slug(tag):
    """前台标签/分类链接：小写并把空格换成 '-'"""
    return str(tag).lower().replace(' ', '-')
