class BlogException(Exception):
    """博客系统基础异常类"""
    def __init__(self, message, code=500, payload=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['error'] = self.message
        rv['success'] = False
        return rv


class ValidationError(BlogException):
    """请求数据校验失败"""
    def __init__(self, message="Invalid data", payload=None):
        super().__init__(message, code=400, payload=payload)


class Unauthorized(BlogException):
    """未登录或凭据错误"""
    def __init__(self, message="Not authenticated", payload=None):
        super().__init__(message, code=401, payload=payload)


class NotFound(BlogException):
    """资源不存在"""
    def __init__(self, message="Not found", payload=None):
        super().__init__(message, code=404, payload=payload)


class PayloadTooLarge(BlogException):
    def __init__(self, message="File size must be less than 10MB", payload=None):
        super().__init__(message, code=413, payload=payload)


class UnsupportedMediaType(BlogException):
    def __init__(self, message="File type not supported", payload=None):
        super().__init__(message, code=415, payload=payload)
