"""
localStorage 风格的快照存储
每个集合保存在一个键下，值为 JSON 字符串；每次写入都是整份快照的读-改-写。
不加锁，并发写入时后写者覆盖先写者。
"""
import copy
import json
import os
from flask import current_app


class LocalStorage:
    """键值快照：path 为 None 时只保存在进程内存中"""

    def __init__(self, path=None):
        self.path = path
        self._memory = {}

    def _read_snapshot(self):
        if self.path is None:
            return dict(self._memory)
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as fp:
                snapshot = json.load(fp)
        except (OSError, ValueError) as e:
            current_app.logger.warning(f'本地快照读取失败，按空快照处理: {self.path} ({e})')
            return {}
        return snapshot if isinstance(snapshot, dict) else {}

    def _write_snapshot(self, snapshot):
        if self.path is None:
            self._memory = snapshot
            return
        directory = os.path.dirname(self.path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
        tmp_path = f'{self.path}.tmp'
        with open(tmp_path, 'w', encoding='utf-8') as fp:
            json.dump(snapshot, fp, ensure_ascii=False)
        os.replace(tmp_path, self.path)

    def get_item(self, key):
        return self._read_snapshot().get(key)

    def set_item(self, key, value):
        snapshot = self._read_snapshot()
        snapshot[key] = value
        self._write_snapshot(snapshot)

    def remove_item(self, key):
        snapshot = self._read_snapshot()
        if snapshot.pop(key, None) is not None:
            self._write_snapshot(snapshot)

    def keys(self):
        return list(self._read_snapshot().keys())

    def clear(self):
        self._write_snapshot({})


class LocalCollection:
    """
    存放在单个键下的记录列表。
    键不存在时写入种子数据；内容损坏时记录日志并回退到种子数据 (不覆盖原值)。
    """

    def __init__(self, storage, key, seed=None):
        self.storage = storage
        self.key = key
        self.seed = seed

    def _seed_records(self):
        return copy.deepcopy(self.seed()) if self.seed else []

    def _load(self):
        raw = self.storage.get_item(self.key)
        if raw is None:
            records = self._seed_records()
            self._dump(records)
            return records
        try:
            records = json.loads(raw)
        except ValueError:
            current_app.logger.warning(f'{self.key} 内容无法解析，使用默认数据')
            return self._seed_records()
        if not isinstance(records, list):
            current_app.logger.warning(f'{self.key} 不是记录列表，使用默认数据')
            return self._seed_records()
        return records

    def _dump(self, records):
        self.storage.set_item(self.key, json.dumps(records, ensure_ascii=False))

    def all(self):
        return self._load()

    def count(self):
        return len(self._load())

    def get(self, record_id):
        return next((r for r in self._load() if r.get('id') == record_id), None)

    def insert(self, record):
        records = self._load()
        records.append(record)
        self._dump(records)
        return record

    def put(self, record):
        """按 id 整条替换；不存在时返回 None"""
        records = self._load()
        for index, existing in enumerate(records):
            if existing.get('id') == record['id']:
                records[index] = record
                self._dump(records)
                return record
        return None

    def save_many(self, updated):
        """批量替换多条记录，只写一次快照"""
        by_id = {r['id']: r for r in updated}
        records = [by_id.get(r.get('id'), r) for r in self._load()]
        self._dump(records)
        return len(by_id)

    def delete(self, record_id):
        records = self._load()
        remaining = [r for r in records if r.get('id') != record_id]
        if len(remaining) == len(records):
            return False
        self._dump(remaining)
        return True


class LocalSettingsStore:
    """设置快照保存在单个键下 (JSON 对象)"""

    def __init__(self, storage, key='blog_settings'):
        self.storage = storage
        self.key = key

    def load(self):
        raw = self.storage.get_item(self.key)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except ValueError:
            current_app.logger.warning(f'{self.key} 内容无法解析，使用默认设置')
            return None
        return data if isinstance(data, dict) else None

    def save(self, settings):
        self.storage.set_item(self.key, json.dumps(settings, ensure_ascii=False))
