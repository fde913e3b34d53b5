from wtforms import Form, StringField
from wtforms.validators import DataRequired
from blogdesk.utils.validators import validate_text

REQUIRED_MESSAGE = 'Email and password are required'


class LoginForm(Form):
    """登录表单"""
    email = StringField('Email', validators=[validate_text, DataRequired(message=REQUIRED_MESSAGE)])
    password = StringField('Password', validators=[validate_text, DataRequired(message=REQUIRED_MESSAGE)])
