from wtforms import Form, StringField
from wtforms.validators import DataRequired, Length
from blogdesk.utils.validators import validate_text, validate_slug, validate_hex_color


class CategoryForm(Form):
    """新建分类"""
    name = StringField('Name', validators=[
        validate_text, DataRequired(message='Category name is required'), Length(max=128)])
    slug = StringField('Slug', validators=[validate_text, validate_slug, Length(max=128)])
    description = StringField('Description', validators=[validate_text, Length(max=1000)])
    color = StringField('Color', validators=[validate_text, validate_hex_color])


class CategoryUpdateForm(CategoryForm):
    """修改分类：所有字段可选"""
    name = StringField('Name', validators=[validate_text, Length(max=128)])
