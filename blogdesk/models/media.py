from blogdesk.extensions import db
from .base import BaseModel


class MediaFile(BaseModel):
    """媒体文件 (内容以 data: URL 保存)"""
    __tablename__ = 'media_files'
    FIELD_MAP = {
        'createdAt': None,
        'uploadedAt': 'created_at',
        'filename': 'filename',
        'originalName': 'original_name',
        'mimeType': 'mime_type',
        'size': 'size',
        'width': 'width',
        'height': 'height',
        'url': 'url',
        'altText': 'alt_text',
        'caption': 'caption',
        'uploadedBy': 'uploaded_by',
        'tags': 'tags',
        'folder': 'folder',
    }

    filename = db.Column(db.String(256))
    original_name = db.Column(db.String(256))
    mime_type = db.Column(db.String(128))
    size = db.Column(db.Integer, default=0)  # 字节数
    width = db.Column(db.Integer)
    height = db.Column(db.Integer)
    url = db.Column(db.Text)
    alt_text = db.Column(db.String(512), default='')
    caption = db.Column(db.Text, default='')
    uploaded_by = db.Column(db.String(64), default='admin')
    tags = db.Column(db.JSON, default=list)
    folder = db.Column(db.String(64), default='uploads', index=True)


class MediaFolder(BaseModel):
    """媒体文件夹"""
    __tablename__ = 'media_folders'
    FIELD_MAP = {
        'updatedAt': None,
        'name': 'name',
        'slug': 'slug',
        'description': 'description',
        'mediaCount': 'media_count',
    }

    name = db.Column(db.String(128), nullable=False)
    slug = db.Column(db.String(128), index=True)
    description = db.Column(db.Text)
    media_count = db.Column(db.Integer, default=0)
