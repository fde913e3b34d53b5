from wtforms import Form, StringField
from wtforms.fields import Field
from wtforms.validators import DataRequired, Length
from blogdesk.utils.validators import validate_text, validate_tag_list


class FolderForm(Form):
    name = StringField('Name', validators=[
        validate_text, DataRequired(message='Folder name is required'), Length(max=128)])
    description = StringField('Description', validators=[validate_text, Length(max=500)])


class MediaUpdateForm(Form):
    """可修改的媒体元数据"""
    altText = StringField('Alt text', validators=[validate_text, Length(max=512)])
    caption = StringField('Caption', validators=[validate_text, Length(max=2000)])
    tags = Field('Tags', validators=[validate_tag_list])
    folder = StringField('Folder', validators=[validate_text])
