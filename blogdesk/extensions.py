from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager
from flask_caching import Cache

# 初始化扩展对象 (暂不绑定 app)
db = SQLAlchemy()
migrate = Migrate()
cache = Cache()
login_manager = LoginManager()

# 后台 API 只返回 JSON，不做登录跳转
login_manager.session_protection = 'basic'


@login_manager.user_loader
def load_user(user_id):
    """Flask-Login 用户加载回调：会话中保存的是用户 id 字符串"""
    from blogdesk.services.user_service import UserService
    record = UserService.get_by_id(user_id)
    if record is None:
        return None
    return UserService.as_login_user(record)


@login_manager.unauthorized_handler
def unauthorized():
    from blogdesk.exceptions import Unauthorized
    raise Unauthorized('Not authenticated')
