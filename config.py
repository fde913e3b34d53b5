import os
from dotenv import load_dotenv

# 加载 .env 环境变量
load_dotenv()
basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    """基础配置类"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'hard-to-guess-string'

    # 存储后端：local (localStorage 风格快照) / database (SQLAlchemy)
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'local')
    # 为 None 时快照只保存在进程内存中
    LOCAL_STORAGE_PATH = os.environ.get('LOCAL_STORAGE_PATH') or \
        os.path.join(basedir, 'instance', 'blog_storage.json')

    # 数据库配置
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'blogdesk.db')
    AUTO_INIT_DATABASE = os.environ.get('AUTO_INIT_DATABASE', 'true').lower() in ('1', 'true', 'yes')

    # 媒体上传：请求体上限略大于单文件上限，由业务层返回 413
    MEDIA_MAX_UPLOAD_SIZE = 10 * 1024 * 1024
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024

    # 缓存配置 (默认使用 SimpleCache，生产环境可改 Redis)
    CACHE_TYPE = "SimpleCache"
    CACHE_DEFAULT_TIMEOUT = 300

    # 前台站点内容来源：store (进程内) / admin_api (HTTP 拉取后台 API)
    SITE_CONTENT_SOURCE = os.environ.get('SITE_CONTENT_SOURCE', 'store')
    SITE_CONTENT_DIR = os.environ.get('SITE_CONTENT_DIR') or os.path.join(basedir, 'content', 'posts')
    ADMIN_API_URL = os.environ.get('ADMIN_API_URL', 'http://localhost:5000')
    ADMIN_API_TIMEOUT = float(os.environ.get('ADMIN_API_TIMEOUT', '5'))
    POSTS_PER_PAGE = 12

    # 认证
    SESSION_COOKIE_NAME = 'admin-session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Strict'
    PASSWORD_HASH_METHOD = 'scrypt'

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    @staticmethod
    def init_app(app):
        # 确保实例目录存在
        instance_dir = os.path.join(basedir, 'instance')
        if not os.path.exists(instance_dir):
            os.makedirs(instance_dir)


class DevelopmentConfig(Config):
    """开发环境配置"""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """生产环境配置"""
    DEBUG = False
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'database')

    DATABASE_URL = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'blogdesk_prod.db')
    # PostgreSQL URL 修正（部分托管平台使用 postgres://）
    if DATABASE_URL and DATABASE_URL.startswith('postgres://'):
        DATABASE_URL = DATABASE_URL.replace('postgres://', 'postgresql://', 1)

    SQLALCHEMY_DATABASE_URI = DATABASE_URL

    # 安全设置
    SESSION_COOKIE_SECURE = True

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)


class TestingConfig(Config):
    TESTING = True
    STORAGE_BACKEND = 'local'
    LOCAL_STORAGE_PATH = None
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    CACHE_TYPE = 'NullCache'
    SITE_CONTENT_SOURCE = 'store'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    LOG_LEVEL = 'WARNING'

    @staticmethod
    def init_app(app):
        pass


class TestingDatabaseConfig(TestingConfig):
    """测试：内存 SQLite 作为存储后端"""
    STORAGE_BACKEND = 'database'
    AUTO_INIT_DATABASE = True


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'testing-database': TestingDatabaseConfig,
    'default': DevelopmentConfig
}
