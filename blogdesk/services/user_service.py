from flask import current_app
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from blogdesk.exceptions import ValidationError, NotFound
from blogdesk.models.base import new_id
from blogdesk.storage import get_collection
from blogdesk.storage.defaults import ROLE_PERMISSIONS
from blogdesk.utils.dates import now_iso, sort_key
from blogdesk.utils.validators import is_valid_email

USER_ROLES = tuple(ROLE_PERMISSIONS)
USER_STATUSES = ('active', 'inactive', 'banned')
EDITABLE_FIELDS = ('name', 'email', 'role', 'status', 'avatar', 'bio', 'website', 'postsCount')


class LoginUser(UserMixin):
    """Flask-Login 会话用户，包装一条用户记录"""

    def __init__(self, record):
        self.record = record
        self.id = record['id']
        self.name = record.get('name')
        self.email = record.get('email')
        self.role = record.get('role')

    @property
    def is_active(self):
        return self.record.get('status', 'active') == 'active'


def public(record):
    """对外输出时去掉密码哈希"""
    if record is None:
        return None
    return {k: v for k, v in record.items() if k != 'passwordHash'}


class UserService:

    @staticmethod
    def _collection():
        return get_collection('users')

    @staticmethod
    def _hash(password):
        return generate_password_hash(password, method=current_app.config['PASSWORD_HASH_METHOD'])

    @staticmethod
    def _find_by_email(email):
        email = (email or '').strip().lower()
        return next((u for u in UserService._collection().all()
                     if (u.get('email') or '').lower() == email), None)

    @staticmethod
    def _check_email(email, exclude_id=None):
        if not is_valid_email(email):
            raise ValidationError('Invalid email address')
        existing = UserService._find_by_email(email)
        if existing and existing['id'] != exclude_id:
            raise ValidationError('Email already exists')

    @staticmethod
    def _check_role(role):
        if role not in USER_ROLES:
            raise ValidationError(f'Invalid role: {role}')

    @staticmethod
    def as_login_user(record):
        return LoginUser(record)

    @staticmethod
    def get_all():
        """按最近登录时间倒序"""
        users = UserService._collection().all()
        users.sort(key=lambda u: sort_key(u.get('lastLogin')), reverse=True)
        return [public(u) for u in users]

    @staticmethod
    def get_by_id(user_id):
        return public(UserService._collection().get(user_id))

    @staticmethod
    def get_by_email(email):
        return public(UserService._find_by_email(email))

    @staticmethod
    def create(data):
        name = (data.get('name') or '').strip()
        email = (data.get('email') or '').strip()
        if not name or not email:
            raise ValidationError('Name and email are required')
        UserService._check_email(email)
        role = data.get('role') or 'subscriber'
        UserService._check_role(role)
        status = data.get('status') or 'active'
        if status not in USER_STATUSES:
            raise ValidationError(f'Invalid status: {status}')

        now = now_iso()
        user = {
            'id': new_id(),
            'name': name,
            'email': email,
            'role': role,
            'status': status,
            'avatar': data.get('avatar'),
            'bio': data.get('bio'),
            'website': data.get('website'),
            'postsCount': 0,
            'lastLogin': now,
            'createdAt': now,
            'permissions': list(ROLE_PERMISSIONS[role]),
            'passwordHash': UserService._hash(data['password']) if data.get('password') else None,
        }
        return public(UserService._collection().insert(user))

    @staticmethod
    def update(user_id, updates):
        collection = UserService._collection()
        user = collection.get(user_id)
        if user is None:
            raise NotFound('User not found')

        changes = {k: v for k, v in updates.items() if k in EDITABLE_FIELDS}
        if 'name' in changes and not (changes['name'] or '').strip():
            raise ValidationError('Name is required')
        if 'email' in changes:
            changes['email'] = (changes['email'] or '').strip()
            UserService._check_email(changes['email'], exclude_id=user_id)
        if 'status' in changes and changes['status'] not in USER_STATUSES:
            raise ValidationError(f'Invalid status: {changes["status"]}')
        if 'role' in changes:
            UserService._check_role(changes['role'])
            # 角色变更时同步权限
            changes['permissions'] = list(ROLE_PERMISSIONS[changes['role']])
        if updates.get('password'):
            changes['passwordHash'] = UserService._hash(updates['password'])

        user.update(changes)
        return public(collection.put(user))

    @staticmethod
    def delete(user_id):
        if not UserService._collection().delete(user_id):
            raise NotFound('User not found')
        return True

    @staticmethod
    def authenticate(email, password):
        """校验邮箱密码；成功时记录登录时间并返回用户，失败返回 None"""
        user = UserService._find_by_email(email)
        if user is None or not user.get('passwordHash'):
            return None
        if not check_password_hash(user['passwordHash'], password or ''):
            current_app.logger.warning(f'登录失败: {email}')
            return None
        if user.get('status') != 'active':
            current_app.logger.warning(f'非活跃账户尝试登录: {email}')
            return None
        user['lastLogin'] = now_iso()
        return public(UserService._collection().put(user))
