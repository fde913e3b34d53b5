"""
表单验证器
"""
from wtforms.validators import ValidationError, StopValidation
import re

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
SLUG_PATTERN = re.compile(r'^[a-z0-9]+(?:-[a-z0-9]+)*$')
HEX_COLOR_PATTERN = re.compile(r'^#(?:[0-9a-fA-F]{3}){1,2}$')


def is_valid_email(value):
    return bool(value) and bool(EMAIL_PATTERN.match(value))


def is_valid_slug(value):
    return bool(value) and bool(SLUG_PATTERN.match(value))


def validate_email(form, field):
    """验证邮箱格式"""
    if field.data:
        if not is_valid_email(field.data):
            raise ValidationError('Invalid email address')


def validate_slug(form, field):
    """slug 只能包含小写字母、数字和单个连字符"""
    if field.data:
        if not is_valid_slug(field.data):
            raise ValidationError('Slug may only contain lowercase letters, numbers and hyphens')


def validate_hex_color(form, field):
    """验证颜色值 #RGB / #RRGGBB"""
    if field.data:
        if not HEX_COLOR_PATTERN.match(field.data):
            raise ValidationError('Color must be a hex value like #3B82F6')


def validate_text(form, field):
    """文本字段必须是字符串，否则中止后续校验"""
    if field.data is not None and not isinstance(field.data, str):
        raise StopValidation(f"{field.name} must be a string")


def validate_tag_list(form, field):
    """标签：逗号分隔的字符串或字符串数组"""
    if field.data is not None and not isinstance(field.data, str):
        if not isinstance(field.data, list) or not all(isinstance(v, str) for v in field.data):
            raise ValidationError(f"{field.name} must be a list of strings")


def id_list(message=None):
    """id 数组，允许为空数组"""
    def _id_list(form, field):
        if not isinstance(field.data, list) or not all(isinstance(v, str) for v in field.data):
            raise ValidationError(message or f"{field.name} must be an array of ids")
    return _id_list


def validate_bool(form, field):
    """布尔开关：只接受 true / false / null"""
    if field.data is not None and not isinstance(field.data, bool):
        raise ValidationError(f"{field.name} must be a boolean")


def first_error(form):
    """取表单第一条错误信息，用于 JSON 错误响应"""
    for field_name, errors in form.errors.items():
        if errors:
            return errors[0]
    return 'Invalid data'


def one_of(values, message=None):
    """字段有值时必须属于 values；空值交给 DataRequired 处理"""
    def _one_of(form, field):
        if field.data not in (None, '') and field.data not in values:
            raise ValidationError(message or f'{field.name} must be one of: {", ".join(values)}')
    return _one_of
