from functools import wraps
from flask import current_app, jsonify, request
from werkzeug.exceptions import HTTPException
from blogdesk.exceptions import BlogException, ValidationError


def api_errors(message):
    """
    捕获路由中的意外异常，记录日志并返回统一的 JSON 500 响应。
    业务异常 (BlogException) 与 HTTP 异常交给全局错误处理器。
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except (BlogException, HTTPException):
                raise
            except Exception:
                current_app.logger.exception(f'{request.method} {request.path}: {message}')
                return jsonify({'error': message, 'success': False}), 500
        return decorated_function
    return decorator


def json_payload():
    """读取 JSON 请求体，必须是对象"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Invalid request body')
    return data
