from wtforms import Form, StringField
from wtforms.fields import Field
from wtforms.validators import DataRequired, Length
from blogdesk.services.comment_service import COMMENT_STATUSES
from blogdesk.utils.validators import validate_text, id_list, validate_tag_list, one_of

BULK_REQUEST_ERROR = 'Invalid request. Action and commentIds array required.'


class CommentForm(Form):
    """新建评论：postId / author / content 必填"""
    postId = StringField('Post', validators=[validate_text, DataRequired(message='postId is required')])
    author = Field('Author', validators=[DataRequired(message='author is required')])
    content = StringField('Content', validators=[
        validate_text, DataRequired(message='content is required'), Length(max=10000)])
    status = StringField('Status', validators=[validate_text, one_of(COMMENT_STATUSES)])
    parentId = StringField('Parent', validators=[validate_text])


class CommentUpdateForm(Form):
    content = StringField('Content', validators=[validate_text, Length(max=10000)])
    status = StringField('Status', validators=[validate_text, one_of(COMMENT_STATUSES)])
    flagReasons = Field('Flag reasons', validators=[validate_tag_list])


class BulkActionForm(Form):
    """批量操作请求"""
    action = StringField('Action', validators=[validate_text, DataRequired(message=BULK_REQUEST_ERROR)])
    commentIds = Field('Comment ids', validators=[id_list(message=BULK_REQUEST_ERROR)])
    status = StringField('Status', validators=[validate_text, one_of(COMMENT_STATUSES)])
    flagReasons = Field('Flag reasons', validators=[validate_tag_list])
