"""
认证 API
登录成功后写入会话 cookie (admin-session)；后台 CRUD 路由不做登录校验
"""
from flask import jsonify, request, current_app
from flask_login import login_user, logout_user, login_required, current_user
from . import auth_bp
from .forms import LoginForm
from blogdesk.exceptions import ValidationError, Unauthorized
from blogdesk.services.user_service import UserService
from blogdesk.utils.decorators import api_errors
from blogdesk.utils.validators import first_error


def _session_user(user):
    return {'id': user['id'], 'name': user['name'], 'email': user['email'], 'role': user['role']}


@auth_bp.route('/login', methods=['POST'])
@api_errors('Internal server error')
def login():
    data = request.get_json(silent=True) or {}
    form = LoginForm(data=data)
    if not form.validate():
        raise ValidationError(first_error(form))

    user = UserService.authenticate(form.email.data, form.password.data)
    if user is None:
        raise Unauthorized('Invalid credentials')

    login_user(UserService.as_login_user(user), remember=bool(data.get('remember')))
    current_app.logger.info(f'用户登录: {user["email"]}')
    return jsonify({'success': True, 'user': _session_user(user)})


@auth_bp.route('/me', methods=['GET'])
@api_errors('Internal server error')
def me():
    if not current_user.is_authenticated:
        raise Unauthorized('Not authenticated')
    return jsonify({'success': True, 'user': _session_user(current_user.record)})


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    return jsonify({'success': True, 'message': 'Logged out'})
