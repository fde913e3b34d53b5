import copy
import uuid
from blogdesk.extensions import db
from blogdesk.utils.dates import utc_now, to_iso, parse_iso


def new_id():
    return uuid.uuid4().hex


class BaseModel(db.Model):
    """
    博客模型基类
    包含：字符串主键, 创建时间, 更新时间, 与 camelCase 记录互转的序列化方法
    """
    __abstract__ = True

    # 记录字段 (camelCase) -> 列属性名，由子类补充
    FIELD_MAP = {}

    id = db.Column(db.String(64), primary_key=True, default=new_id)
    created_at = db.Column(db.DateTime, default=utc_now, index=True)
    updated_at = db.Column(db.DateTime, default=utc_now)

    @classmethod
    def fields(cls):
        mapping = {'id': 'id', 'createdAt': 'created_at', 'updatedAt': 'updated_at'}
        mapping.update(cls.FIELD_MAP)
        return mapping

    def to_dict(self):
        """
        通用序列化方法：模型 -> camelCase 字典，时间转为 ISO 字符串。
        值为 None 的 DateTime 字段原样输出为 null。
        """
        data = {}
        for key, attr in self.fields().items():
            if attr is None:
                continue
            val = getattr(self, attr)
            if isinstance(self.__table__.columns[attr].type, db.DateTime):
                val = to_iso(val)
            elif isinstance(self.__table__.columns[attr].type, db.JSON):
                val = copy.deepcopy(val)
            data[key] = val
        return data

    def apply(self, record):
        """把 camelCase 记录写回列属性，ISO 字符串解析为 datetime"""
        for key, attr in self.fields().items():
            if attr is None or key not in record:
                continue
            val = record[key]
            if isinstance(self.__table__.columns[attr].type, db.DateTime):
                val = parse_iso(val)
            setattr(self, attr, val)
        return self
