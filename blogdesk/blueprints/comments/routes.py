"""评论管理 API"""
from flask import jsonify, request
from . import comments_bp
from .forms import CommentForm, CommentUpdateForm, BulkActionForm, BULK_REQUEST_ERROR
from blogdesk.exceptions import ValidationError, NotFound
from blogdesk.services.comment_service import CommentService
from blogdesk.utils.decorators import api_errors, json_payload
from blogdesk.utils.validators import first_error


def _comment_list(comments, **extra):
    payload = {'comments': comments, 'total': len(comments), 'success': True}
    payload.update(extra)
    return jsonify(payload)


@comments_bp.route('', methods=['GET'])
@api_errors('Failed to fetch comments')
def list_comments():
    """
    评论列表，按以下优先级分发查询参数：
    stats=true > search > flagged=true > status > postId > 全部
    """
    status = request.args.get('status')
    post_id = request.args.get('postId')
    search = request.args.get('search')

    if request.args.get('stats') == 'true':
        return jsonify({**CommentService.get_stats(), 'success': True})
    if search:
        return _comment_list(CommentService.search(search))
    if request.args.get('flagged') == 'true':
        return _comment_list(CommentService.get_flagged())
    if status and status != 'all':
        return _comment_list(CommentService.get_by_status(status), filter={'status': status})
    if post_id:
        return _comment_list(CommentService.get_by_post(post_id), filter={'postId': post_id})
    return _comment_list(CommentService.get_all())


@comments_bp.route('', methods=['POST'])
@api_errors('Failed to create comment')
def create_comment():
    data = json_payload()
    form = CommentForm(data=data)
    if not form.validate():
        raise ValidationError(first_error(form))
    data.setdefault('userAgent', request.headers.get('User-Agent'))
    data.setdefault('ipAddress', request.remote_addr)
    comment = CommentService.create(data)
    return jsonify({'comment': comment, 'success': True, 'message': 'Comment created successfully'}), 201


@comments_bp.route('/bulk', methods=['POST'])
@api_errors('Failed to perform bulk action')
def bulk_action():
    """批量 updateStatus / delete / flag / unflag"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError(BULK_REQUEST_ERROR)
    form = BulkActionForm(data=data)
    if not form.validate():
        raise ValidationError(first_error(form))

    ids = data['commentIds']
    result_key, count = CommentService.bulk_action(
        data['action'], ids, status=data.get('status'), flag_reasons=data.get('flagReasons'))
    return jsonify({
        result_key: count,
        'success': True,
        'message': f'{count} comments {result_key}'
    })


@comments_bp.route('/<comment_id>', methods=['GET'])
@api_errors('Failed to fetch comment')
def get_comment(comment_id):
    comment = CommentService.get_by_id(comment_id)
    if comment is None:
        raise NotFound('Comment not found')
    return jsonify({'comment': comment, 'success': True})


@comments_bp.route('/<comment_id>', methods=['PUT'])
@api_errors('Failed to update comment')
def update_comment(comment_id):
    data = json_payload()
    form = CommentUpdateForm(data=data)
    if not form.validate():
        raise ValidationError(first_error(form))
    comment = CommentService.update(comment_id, data)
    if comment is None:
        raise NotFound('Comment not found')
    return jsonify({'comment': comment, 'success': True, 'message': 'Comment updated successfully'})


@comments_bp.route('/<comment_id>', methods=['DELETE'])
@api_errors('Failed to delete comment')
def delete_comment(comment_id):
    if not CommentService.delete(comment_id):
        raise NotFound('Comment not found')
    return jsonify({'success': True, 'message': 'Comment deleted successfully'})


@comments_bp.route('/<comment_id>/like', methods=['POST'])
@api_errors('Failed to like comment')
def like_comment(comment_id):
    comment = CommentService.add_like(comment_id)
    return jsonify({'comment': comment, 'success': True})


@comments_bp.route('/<comment_id>/dislike', methods=['POST'])
@api_errors('Failed to dislike comment')
def dislike_comment(comment_id):
    comment = CommentService.add_dislike(comment_id)
    return jsonify({'comment': comment, 'success': True})
