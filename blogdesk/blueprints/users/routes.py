"""用户管理 API"""
from flask import jsonify
from . import users_bp
from .forms import UserForm, UserUpdateForm
from blogdesk.exceptions import ValidationError, NotFound
from blogdesk.services.user_service import UserService
from blogdesk.utils.decorators import api_errors, json_payload
from blogdesk.utils.validators import first_error


@users_bp.route('', methods=['GET'])
@api_errors('Failed to fetch users')
def list_users():
    users = UserService.get_all()
    return jsonify({'users': users, 'total': len(users), 'success': True})


@users_bp.route('', methods=['POST'])
@api_errors('Failed to create user')
def create_user():
    data = json_payload()
    form = UserForm(data=data)
    if not form.validate():
        raise ValidationError(first_error(form))
    user = UserService.create(data)
    return jsonify({'user': user, 'success': True, 'message': 'User created successfully'}), 201


@users_bp.route('/<user_id>', methods=['GET'])
@api_errors('Failed to fetch user')
def get_user(user_id):
    user = UserService.get_by_id(user_id)
    if user is None:
        raise NotFound('User not found')
    return jsonify({'user': user, 'success': True})


@users_bp.route('/<user_id>', methods=['PUT'])
@api_errors('Failed to update user')
def update_user(user_id):
    data = json_payload()
    form = UserUpdateForm(data=data)
    if not form.validate():
        raise ValidationError(first_error(form))
    user = UserService.update(user_id, data)
    return jsonify({'user': user, 'success': True, 'message': 'User updated successfully'})


@users_bp.route('/<user_id>', methods=['DELETE'])
@api_errors('Failed to delete user')
def delete_user(user_id):
    UserService.delete(user_id)
    return jsonify({'success': True, 'message': 'User deleted successfully'})
