import markdown
import yaml
from blogdesk.extensions import cache

MARKDOWN_EXTENSIONS = ['extra', 'toc', 'sane_lists']
FRONT_MATTER_DELIMITER = '---'


@cache.memoize(timeout=600)
def render_markdown(content):
    """Markdown 正文渲染为 HTML (按内容缓存)"""
    if not content:
        return ''
    return markdown.markdown(content, extensions=MARKDOWN_EXTENSIONS, output_format='html')


def parse_front_matter(text):
    """
    解析以 --- 包围的 YAML 前置元数据
    返回 (meta, body)，meta 的键统一小写，值保持 YAML 类型 (列表、布尔、日期)
    元数据不是合法 YAML 时抛出 yaml.YAMLError
    """
    lines = text.splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}, text.strip()

    for i, line in enumerate(lines[1:], start=1):
        if line.strip() in (FRONT_MATTER_DELIMITER, '...'):
            block = '\n'.join(lines[1:i])
            body = '\n'.join(lines[i + 1:]).strip()
            break
    else:
        # 没有结束分隔符，整个文件都当作正文
        return {}, text.strip()

    data = yaml.safe_load(block)
    if not isinstance(data, dict):
        return {}, body
    return {str(key).lower(): value for key, value in data.items()}, body
