from wtforms import Form, StringField
from wtforms.fields import Field
from wtforms.validators import DataRequired, Length, ValidationError
from blogdesk.services.post_service import POST_STATUSES
from blogdesk.utils.validators import validate_text, validate_slug, validate_tag_list, validate_bool, one_of


def validate_featured_image(form, field):
    """特色图片：null 或包含 url 的对象"""
    if field.data is not None:
        if not isinstance(field.data, dict) or not isinstance(field.data.get('url'), str):
            raise ValidationError('featuredImage must be an object with a url')


class PostForm(Form):
    """新建文章"""
    title = StringField('Title', validators=[
        validate_text, DataRequired(message='Title is required'), Length(max=256)])
    slug = StringField('Slug', validators=[validate_text, validate_slug, Length(max=256)])
    excerpt = StringField('Excerpt', validators=[validate_text, Length(max=1000)])
    content = StringField('Content', validators=[validate_text])
    status = StringField('Status', validators=[validate_text, one_of(POST_STATUSES)])
    categoryId = StringField('Category', validators=[validate_text])
    tags = Field('Tags', validators=[validate_tag_list])
    seoTitle = StringField('SEO title', validators=[validate_text, Length(max=256)])
    seoDescription = StringField('SEO description', validators=[validate_text, Length(max=500)])
    seoKeywords = Field('SEO keywords', validators=[validate_tag_list])
    featuredImage = Field('Featured image', validators=[validate_featured_image])
    featured = Field('Featured', validators=[validate_bool])


class PostUpdateForm(PostForm):
    """修改文章：所有字段可选"""
    title = StringField('Title', validators=[validate_text, Length(max=256)])
