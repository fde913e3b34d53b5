"""
媒体库服务
上传为模拟实现：文件内容编码为 data: URL 与元数据一起保存，不落盘。
"""
import io
from collections import Counter
from flask import current_app
from PIL import Image, UnidentifiedImageError
from blogdesk.exceptions import ValidationError, NotFound, PayloadTooLarge, UnsupportedMediaType
from blogdesk.models.base import new_id
from blogdesk.storage import get_collection
from blogdesk.storage.defaults import DEFAULT_FOLDER_IDS
from blogdesk.utils.dates import now_iso, sort_key
from blogdesk.utils.file_helper import (
    FILE_TYPES, allowed_mime_type, generate_unique_filename, get_file_type, to_data_url, format_size
)
from blogdesk.utils.text import slugify

DEFAULT_FOLDER = 'uploads'
EDITABLE_FIELDS = ('altText', 'caption', 'tags', 'folder')


def parse_tag_list(tags):
    """'a, b ,c' -> ['a', 'b', 'c']"""
    if not tags:
        return []
    if isinstance(tags, str):
        tags = tags.split(',')
    return [str(t).strip() for t in tags if str(t).strip()]


def image_dimensions(content):
    """用 Pillow 读取图片尺寸，无法识别时返回 (None, None)"""
    try:
        with Image.open(io.BytesIO(content)) as img:
            return img.size
    except (UnidentifiedImageError, OSError) as e:
        current_app.logger.debug(f'无法读取图片尺寸: {e}')
        return None, None


class MediaService:

    @staticmethod
    def _files():
        return get_collection('media_files')

    @staticmethod
    def _folders():
        return get_collection('media_folders')

    # ---------- 文件 ----------

    @staticmethod
    def get_all():
        files = MediaService._files().all()
        return sorted(files, key=lambda f: sort_key(f.get('uploadedAt')), reverse=True)

    @staticmethod
    def get_by_id(file_id):
        return MediaService._files().get(file_id)

    @staticmethod
    def get_by_folder(folder_id):
        return [f for f in MediaService.get_all() if f.get('folder') == folder_id]

    @staticmethod
    def get_by_type(file_type):
        if file_type == 'all':
            return MediaService.get_all()
        if file_type not in FILE_TYPES:
            raise ValidationError(f'Invalid type: {file_type}')
        return [f for f in MediaService.get_all() if get_file_type(f.get('mimeType')) == file_type]

    @staticmethod
    def search(query):
        query = (query or '').lower()
        results = []
        for f in MediaService.get_all():
            fields = (f.get('originalName'), f.get('filename'), f.get('altText'), f.get('caption'))
            if any(query in (v or '').lower() for v in fields) \
                    or any(query in t.lower() for t in f.get('tags') or []):
                results.append(f)
        return results

    @staticmethod
    def _check_folder(folder_id):
        if MediaService._folders().get(folder_id) is None:
            raise ValidationError(f'Unknown folder: {folder_id}')

    @staticmethod
    def upload(file_storage, alt_text=None, caption=None, tags=None, folder=None):
        """保存上传文件的元数据与内容，返回新记录"""
        if file_storage is None or not file_storage.filename:
            raise ValidationError('No file provided')

        content = file_storage.read()
        if len(content) > current_app.config['MEDIA_MAX_UPLOAD_SIZE']:
            raise PayloadTooLarge('File size must be less than 10MB')
        mimetype = file_storage.mimetype
        if not allowed_mime_type(mimetype):
            current_app.logger.info(f'拒绝上传不支持的类型: {mimetype}')
            raise UnsupportedMediaType('File type not supported')

        folder = folder or DEFAULT_FOLDER
        MediaService._check_folder(folder)

        width, height = (None, None)
        if get_file_type(mimetype) == 'image':
            width, height = image_dimensions(content)

        now = now_iso()
        record = {
            'id': new_id(),
            'filename': generate_unique_filename(file_storage.filename),
            'originalName': file_storage.filename,
            'mimeType': mimetype,
            'size': len(content),
            'width': width,
            'height': height,
            'url': to_data_url(content, mimetype),
            'altText': alt_text or '',
            'caption': caption or '',
            'uploadedBy': 'admin',
            'tags': parse_tag_list(tags),
            'folder': folder,
            'uploadedAt': now,
            'updatedAt': now,
        }
        current_app.logger.info(f'媒体上传成功: {record["originalName"]} ({format_size(record["size"])})')
        return MediaService._files().insert(record)

    @staticmethod
    def update(file_id, updates):
        """只允许修改 altText / caption / tags / folder"""
        collection = MediaService._files()
        record = collection.get(file_id)
        if record is None:
            raise NotFound('File not found')
        changes = {k: v for k, v in updates.items() if k in EDITABLE_FIELDS}
        if 'tags' in changes:
            changes['tags'] = parse_tag_list(changes['tags'])
        if 'folder' in changes:
            changes['folder'] = changes['folder'] or DEFAULT_FOLDER
            MediaService._check_folder(changes['folder'])
        record.update(changes)
        record['updatedAt'] = now_iso()
        return collection.put(record)

    @staticmethod
    def delete(file_id):
        if not MediaService._files().delete(file_id):
            raise NotFound('File not found')
        return True

    # ---------- 文件夹 ----------

    @staticmethod
    def get_all_folders():
        """按名称排序，并重新统计每个文件夹的文件数"""
        collection = MediaService._folders()
        folders = collection.all()
        counts = Counter(f.get('folder') for f in MediaService._files().all())
        for folder in folders:
            folder['mediaCount'] = counts[folder['id']]
        if folders:
            collection.save_many(folders)
        return sorted(folders, key=lambda f: (f.get('name') or '').lower())

    @staticmethod
    def get_folder(folder_id):
        return MediaService._folders().get(folder_id)

    @staticmethod
    def create_folder(name, description=None):
        name = (name or '').strip()
        if not name:
            raise ValidationError('Folder name is required')
        folder = {
            'id': new_id(),
            'name': name,
            'slug': slugify(name),
            'description': description,
            'mediaCount': 0,
            'createdAt': now_iso(),
        }
        return MediaService._folders().insert(folder)

    @staticmethod
    def delete_folder(folder_id):
        """默认文件夹不可删除；被删文件夹内的文件移到 uploads"""
        if folder_id in DEFAULT_FOLDER_IDS:
            raise ValidationError('Default folders cannot be deleted')
        folders = MediaService._folders()
        if folders.get(folder_id) is None:
            raise NotFound('Folder not found')

        files = MediaService._files()
        moved = [dict(f, folder=DEFAULT_FOLDER) for f in files.all() if f.get('folder') == folder_id]
        if moved:
            files.save_many(moved)
        folders.delete(folder_id)
        return len(moved)

    # ---------- 统计 ----------

    @staticmethod
    def get_stats():
        files = MediaService._files().all()
        types = Counter(get_file_type(f.get('mimeType')) for f in files)
        total_size = sum(f.get('size') or 0 for f in files)
        folder_counts = Counter(f.get('folder') for f in files)
        return {
            'totalFiles': len(files),
            'totalSize': total_size,
            'totalSizeFormatted': format_size(total_size),
            'byType': {
                'images': types['image'],
                'videos': types['video'],
                'audio': types['audio'],
                'documents': types['pdf'] + types['document'],
                'other': types['archive'] + types['other'],
            },
            'byFolder': [
                {'id': folder['id'], 'name': folder['name'], 'count': folder_counts[folder['id']]}
                for folder in MediaService._folders().all()
            ],
        }

    @staticmethod
    def format_file_size(size):
        return format_size(size)
