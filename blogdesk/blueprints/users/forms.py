from wtforms import Form, StringField
from wtforms.validators import DataRequired, Length, ValidationError
from blogdesk.services.user_service import USER_ROLES, USER_STATUSES
from blogdesk.utils.validators import validate_text, validate_email, one_of

REQUIRED_MESSAGE = 'Name and email are required'


def validate_password(form, field):
    """密码可选，提供时至少 6 位"""
    if field.data and len(field.data) < 6:
        raise ValidationError('Password must be at least 6 characters')


class UserForm(Form):
    """新建用户"""
    name = StringField('Name', validators=[validate_text, DataRequired(message=REQUIRED_MESSAGE), Length(max=128)])
    email = StringField('Email', validators=[
        validate_text, DataRequired(message=REQUIRED_MESSAGE), validate_email, Length(max=128)])
    role = StringField('Role', validators=[validate_text, one_of(USER_ROLES)])
    status = StringField('Status', validators=[validate_text, one_of(USER_STATUSES)])
    password = StringField('Password', validators=[validate_text, validate_password])
    website = StringField('Website', validators=[validate_text, Length(max=256)])
    bio = StringField('Bio', validators=[validate_text, Length(max=2000)])


class UserUpdateForm(UserForm):
    name = StringField('Name', validators=[validate_text, Length(max=128)])
    email = StringField('Email', validators=[validate_text, validate_email, Length(max=128)])
