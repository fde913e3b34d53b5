"""
关系型数据库后端 (Flask-SQLAlchemy)
每个操作独立提交，失败时回滚并向上抛出
"""
import copy
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from blogdesk.extensions import db


class DatabaseCollection:
    """与 LocalCollection 相同接口的表访问封装，读写 camelCase 记录"""

    def __init__(self, model, seed=None):
        self.model = model
        self.seed = seed

    def _commit(self, action):
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f'{self.model.__tablename__} {action} 失败: {e}')
            raise

    def all(self):
        return [obj.to_dict() for obj in self.model.query.all()]

    def count(self):
        return self.model.query.count()

    def get(self, record_id):
        obj = db.session.get(self.model, record_id)
        return obj.to_dict() if obj else None

    def insert(self, record):
        obj = self.model().apply(record)
        db.session.add(obj)
        self._commit('insert')
        return obj.to_dict()

    def put(self, record):
        obj = db.session.get(self.model, record['id'])
        if obj is None:
            return None
        obj.apply(record)
        self._commit('update')
        return obj.to_dict()

    def save_many(self, records):
        count = 0
        for record in records:
            obj = db.session.get(self.model, record['id'])
            if obj is not None:
                obj.apply(record)
                count += 1
        self._commit('bulk update')
        return count

    def delete(self, record_id):
        obj = db.session.get(self.model, record_id)
        if obj is None:
            return False
        db.session.delete(obj)
        self._commit('delete')
        return True

    def seed_if_empty(self):
        """表为空时写入种子数据，返回写入条数"""
        if self.seed is None or self.model.query.count() > 0:
            return 0
        records = self.seed()
        for record in records:
            db.session.add(self.model().apply(record))
        self._commit('seed')
        return len(records)


class DatabaseSettingsStore:
    """设置按分区存为 SiteSetting 行"""

    def __init__(self, model):
        self.model = model

    def load(self):
        rows = self.model.query.all()
        if not rows:
            return None
        return {row.section: copy.deepcopy(row.value) for row in rows}

    def save(self, settings):
        existing = {row.section: row for row in self.model.query.all()}
        for section, value in settings.items():
            row = existing.pop(section, None)
            if row is None:
                db.session.add(self.model(section=section, value=value))
            else:
                row.value = value
        for row in existing.values():
            db.session.delete(row)
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f'设置保存失败: {e}')
            raise
