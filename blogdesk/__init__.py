import logging
import colorlog
from flask import Flask, jsonify
from flask.logging import default_handler
from werkzeug.exceptions import HTTPException
from config import config
from blogdesk.extensions import db, migrate, login_manager, cache
from blogdesk.exceptions import BlogException
from blogdesk.storage import init_storage, get_storage

# 导入 commands 模块，用于注册 CLI 命令
from blogdesk import commands


def create_app(config_name='default'):
    """博客平台应用工厂函数：后台 API 与前台站点 API 共用一个应用"""
    app = Flask(__name__)

    # 1. 加载配置
    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    # 2. 初始化扩展
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    cache.init_app(app)
    init_storage(app)

    # 3. 配置日志
    configure_logging(app)

    # 4. 注册蓝图 (Blueprints)
    register_blueprints(app)

    # 5. 注册全局错误处理
    register_error_handlers(app)

    # 6. 注册 CLI 命令
    register_commands(app)

    # 7. 数据库后端自动建表并写入种子数据
    auto_init_database(app)

    return app


def auto_init_database(app):
    """database 后端：建表，并为空表写入默认数据"""
    if app.config['STORAGE_BACKEND'] != 'database' or not app.config.get('AUTO_INIT_DATABASE'):
        return
    with app.app_context():
        try:
            db.create_all()
            seeded = get_storage().seed_database()
            created = {name: n for name, n in seeded.items() if n}
            if created:
                app.logger.info(f'数据库初始化完成，写入默认数据: {created}')
        except Exception:
            app.logger.exception('数据库初始化错误')
            raise


def register_blueprints(app):
    """注册后台 API 与前台站点蓝图"""
    from blogdesk.blueprints.posts import posts_bp
    app.register_blueprint(posts_bp, url_prefix='/api/posts')

    from blogdesk.blueprints.categories import categories_bp
    app.register_blueprint(categories_bp, url_prefix='/api/categories')

    from blogdesk.blueprints.comments import comments_bp
    app.register_blueprint(comments_bp, url_prefix='/api/comments')

    from blogdesk.blueprints.media import media_bp
    app.register_blueprint(media_bp, url_prefix='/api/media')

    from blogdesk.blueprints.users import users_bp
    app.register_blueprint(users_bp, url_prefix='/api/users')

    from blogdesk.blueprints.settings import settings_bp
    app.register_blueprint(settings_bp, url_prefix='/api/settings')

    from blogdesk.blueprints.auth import auth_bp
    app.register_blueprint(auth_bp, url_prefix='/api/auth')

    from blogdesk.blueprints.analytics import analytics_bp
    app.register_blueprint(analytics_bp, url_prefix='/api/analytics')

    # 前台站点 (只读)
    from blogdesk.blueprints.site import site_bp
    app.register_blueprint(site_bp, url_prefix='/site')


def register_error_handlers(app):
    """所有错误统一返回 {error, success: false}"""
    @app.errorhandler(BlogException)
    def handle_blog_exception(e):
        return jsonify(e.to_dict()), e.code

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return jsonify({'error': e.description, 'success': False}), e.code

    @app.errorhandler(Exception)
    def internal_server_error(e):
        app.logger.exception('未处理的异常')
        return jsonify({'error': 'Internal server error', 'success': False}), 500


def register_commands(app):
    """注册 Flask CLI 命令"""
    app.cli.add_command(commands.forge)
    app.cli.add_command(commands.status)
    app.cli.add_command(commands.init_db)


def configure_logging(app):
    """配置彩色控制台日志"""
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    app.logger.setLevel(level)
    if app.testing:
        return

    # logger 按名字在多个 app 实例间共享，彩色 handler 只挂一次
    app.logger.removeHandler(default_handler)
    colored = [h for h in app.logger.handlers if isinstance(h.formatter, colorlog.ColoredFormatter)]
    if colored:
        for handler in colored:
            handler.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setLevel(level)

    formatter = colorlog.ColoredFormatter(
        "%(log_color)s[%(asctime)s] %(levelname)-8s%(reset)s %(blue)s%(message)s",
        datefmt="%H:%M:%S",
        reset=True,
        log_colors={
            'DEBUG':    'cyan',
            'INFO':     'green',
            'WARNING':  'yellow',
            'ERROR':    'red',
            'CRITICAL': 'red,bg_white',
        },
        style='%'
    )
    handler.setFormatter(formatter)
    app.logger.addHandler(handler)
