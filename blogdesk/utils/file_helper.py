import base64
import random
import re
import string
import time

# 允许上传的 MIME 类型
ALLOWED_MIME_TYPES = {
    'image/jpeg', 'image/png', 'image/gif', 'image/webp', 'image/svg+xml',
    'video/mp4', 'video/mpeg', 'video/quicktime',
    'audio/mpeg', 'audio/wav', 'audio/ogg',
    'application/pdf',
    'application/msword', 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    'application/vnd.ms-excel', 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    'text/plain', 'text/csv',
    'application/zip', 'application/x-rar-compressed',
}

FILE_TYPES = ('image', 'video', 'audio', 'pdf', 'document', 'archive', 'other')


def allowed_mime_type(mimetype):
    return mimetype in ALLOWED_MIME_TYPES


def get_file_extension(filename):
    """从文件名获取扩展名"""
    if not filename or '.' not in filename:
        return None
    return filename.rsplit('.', 1)[1].lower()


def generate_unique_filename(original_name):
    """{毫秒时间戳}-{6位随机串}-{安全文件名}.{扩展名}"""
    timestamp = int(time.time() * 1000)
    suffix = ''.join(random.choices(string.ascii_lowercase + string.digits, k=6))
    ext = get_file_extension(original_name) or 'bin'
    name = original_name.rsplit('.', 1)[0] if '.' in original_name else original_name
    safe_name = re.sub(r'[^a-zA-Z0-9_-]', '-', name).lower()
    return f"{timestamp}-{suffix}-{safe_name}.{ext}"


def get_file_type(mimetype):
    """根据 MIME 类型归类"""
    mimetype = mimetype or ''
    if mimetype.startswith('image/'):
        return 'image'
    if mimetype.startswith('video/'):
        return 'video'
    if mimetype.startswith('audio/'):
        return 'audio'
    if 'pdf' in mimetype:
        return 'pdf'
    if 'document' in mimetype or 'text' in mimetype:
        return 'document'
    if 'zip' in mimetype or 'archive' in mimetype:
        return 'archive'
    return 'other'


def to_data_url(content, mimetype):
    """把文件内容编码为 data: URL"""
    encoded = base64.b64encode(content).decode('ascii')
    return f"data:{mimetype};base64,{encoded}"


def format_size(size):
    """将字节转换为易读格式，例如 1.5 MB"""
    if not size:
        return '0 Bytes'
    labels = ['Bytes', 'KB', 'MB', 'GB', 'TB']
    n = 0
    size = float(size)
    while size >= 1024 and n < len(labels) - 1:
        size /= 1024
        n += 1
    return f"{round(size, 2):g} {labels[n]}"
