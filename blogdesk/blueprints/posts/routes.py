"""文章管理 API"""
from flask import jsonify, request
from . import posts_bp
from .forms import PostForm, PostUpdateForm
from blogdesk.exceptions import ValidationError, NotFound
from blogdesk.services.post_service import PostService
from blogdesk.utils.decorators import api_errors, json_payload
from blogdesk.utils.validators import first_error


@posts_bp.route('', methods=['GET'])
@api_errors('Failed to fetch posts')
def list_posts():
    """
    文章列表
    支持参数: status (published/featured/draft/archived/all), category, tag, featured, search, limit
    """
    posts = PostService.list_posts(
        status=request.args.get('status'),
        category=request.args.get('category'),
        tag=request.args.get('tag'),
        featured=request.args.get('featured') == 'true',
        search=request.args.get('search'),
        limit=request.args.get('limit', type=int),
    )
    return jsonify({'posts': posts, 'total': len(posts), 'success': True})


@posts_bp.route('', methods=['POST'])
@api_errors('Failed to create post')
def create_post():
    data = json_payload()
    form = PostForm(data=data)
    if not form.validate():
        raise ValidationError(first_error(form))
    post = PostService.create(data)
    return jsonify({'post': post, 'success': True, 'message': 'Post created successfully'}), 201


@posts_bp.route('/<key>', methods=['GET'])
@api_errors('Failed to fetch post')
def get_post(key):
    """按 id 或 slug 获取文章"""
    post = PostService.get_by_id_or_slug(key)
    if post is None:
        raise NotFound('Post not found')
    return jsonify({'post': post, 'success': True})


@posts_bp.route('/<post_id>', methods=['PUT'])
@api_errors('Failed to update post')
def update_post(post_id):
    data = json_payload()
    form = PostUpdateForm(data=data)
    if not form.validate():
        raise ValidationError(first_error(form))
    post = PostService.update(post_id, data)
    return jsonify({'post': post, 'success': True, 'message': 'Post updated successfully'})


@posts_bp.route('/<post_id>', methods=['DELETE'])
@api_errors('Failed to delete post')
def delete_post(post_id):
    PostService.delete(post_id)
    return jsonify({'success': True, 'message': 'Post deleted successfully'})
