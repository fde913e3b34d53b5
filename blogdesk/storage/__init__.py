"""
存储层入口
按 STORAGE_BACKEND 选择 local (快照) 或 database (SQLAlchemy)，
业务服务只通过 get_collection / get_settings_store 访问数据。
"""
from flask import current_app
from blogdesk.models import Category, Post, Comment, MediaFile, MediaFolder, User, SiteSetting
from . import defaults
from .local import LocalStorage, LocalCollection, LocalSettingsStore
from .database import DatabaseCollection, DatabaseSettingsStore

BACKENDS = ('local', 'database')

# 集合名 -> (存储键, 模型, 种子数据)
COLLECTIONS = {
    'posts': ('blog_posts', Post, defaults.default_posts),
    'categories': ('blog_categories', Category, defaults.default_categories),
    'comments': ('blog_comments', Comment, defaults.default_comments),
    'media_files': ('blog_media_files', MediaFile, defaults.default_media_files),
    'media_folders': ('blog_media_folders', MediaFolder, defaults.default_media_folders),
    'users': ('blog_users', User, defaults.default_users),
}

SETTINGS_KEY = 'blog_settings'


class StorageRegistry:
    def __init__(self, backend, local_storage=None):
        if backend not in BACKENDS:
            raise ValueError(f'Unknown STORAGE_BACKEND: {backend}')
        self.backend = backend
        self.local_storage = local_storage

    def collection(self, name):
        key, model, seed = COLLECTIONS[name]
        if self.backend == 'local':
            return LocalCollection(self.local_storage, key, seed)
        return DatabaseCollection(model, seed)

    def settings_store(self):
        if self.backend == 'local':
            return LocalSettingsStore(self.local_storage, SETTINGS_KEY)
        return DatabaseSettingsStore(SiteSetting)

    def seed_database(self):
        """数据库后端：为空表写入种子数据"""
        seeded = {}
        for name in COLLECTIONS:
            seeded[name] = self.collection(name).seed_if_empty()
        return seeded


def init_storage(app):
    backend = app.config.get('STORAGE_BACKEND', 'local')
    local_storage = None
    if backend == 'local':
        local_storage = LocalStorage(app.config.get('LOCAL_STORAGE_PATH'))
    app.extensions['blog_storage'] = StorageRegistry(backend, local_storage)


def get_storage():
    return current_app.extensions['blog_storage']


def get_collection(name):
    return get_storage().collection(name)


def get_settings_store():
    return get_storage().settings_store()
