from blogdesk.extensions import db
from .base import BaseModel


class SiteSetting(BaseModel):
    """站点设置：每个分区一行，值为 JSON 对象"""
    __tablename__ = 'sys_settings'
    FIELD_MAP = {
        'section': 'section',
        'value': 'value',
    }

    section = db.Column(db.String(32), unique=True, nullable=False)
    value = db.Column(db.JSON, default=dict)
