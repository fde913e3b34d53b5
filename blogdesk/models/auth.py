from blogdesk.extensions import db
from .base import BaseModel


class User(BaseModel):
    """后台用户"""
    __tablename__ = 'auth_users'
    FIELD_MAP = {
        'updatedAt': None,
        'name': 'name',
        'email': 'email',
        'role': 'role',
        'status': 'status',
        'avatar': 'avatar',
        'bio': 'bio',
        'website': 'website',
        'postsCount': 'posts_count',
        'lastLogin': 'last_login',
        'permissions': 'permissions',
        'passwordHash': 'password_hash',
    }

    name = db.Column(db.String(128), nullable=False)
    email = db.Column(db.String(128), unique=True, index=True)
    role = db.Column(db.String(20), default='subscriber')  # admin, editor, author, subscriber
    status = db.Column(db.String(20), default='active')  # active, inactive, banned
    avatar = db.Column(db.String(512))
    bio = db.Column(db.Text)
    website = db.Column(db.String(256))
    posts_count = db.Column(db.Integer, default=0)
    last_login = db.Column(db.DateTime, index=True)
    permissions = db.Column(db.JSON, default=list)
    password_hash = db.Column(db.String(256))

    def __repr__(self):
        return f'<User {self.email}>'
