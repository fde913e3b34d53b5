"""分类管理 API"""
from flask import jsonify
from . import categories_bp
from .forms import CategoryForm, CategoryUpdateForm
from blogdesk.exceptions import ValidationError, NotFound
from blogdesk.services.category_service import CategoryService
from blogdesk.utils.decorators import api_errors, json_payload
from blogdesk.utils.validators import first_error


@categories_bp.route('', methods=['GET'])
@api_errors('Failed to fetch categories')
def list_categories():
    """分类列表 (每次读取都会重新统计文章数)"""
    categories = CategoryService.get_all()
    return jsonify({'categories': categories, 'total': len(categories), 'success': True})


@categories_bp.route('', methods=['POST'])
@api_errors('Failed to create category')
def create_category():
    data = json_payload()
    form = CategoryForm(data=data)
    if not form.validate():
        raise ValidationError(first_error(form))
    category = CategoryService.create(data)
    return jsonify({
        'category': category,
        'success': True,
        'message': 'Category created successfully'
    }), 201


@categories_bp.route('/<category_id>', methods=['GET'])
@api_errors('Failed to fetch category')
def get_category(category_id):
    category = CategoryService.get_by_id(category_id)
    if category is None:
        raise NotFound('Category not found')
    return jsonify({'category': category, 'success': True})


@categories_bp.route('/<category_id>', methods=['PUT'])
@api_errors('Failed to update category')
def update_category(category_id):
    data = json_payload()
    form = CategoryUpdateForm(data=data)
    if not form.validate():
        raise ValidationError(first_error(form))
    category = CategoryService.update(category_id, data)
    return jsonify({
        'category': category,
        'success': True,
        'message': 'Category updated successfully'
    })


@categories_bp.route('/<category_id>', methods=['DELETE'])
@api_errors('Failed to delete category')
def delete_category(category_id):
    CategoryService.delete(category_id)
    return jsonify({'success': True, 'message': 'Category deleted successfully'})
