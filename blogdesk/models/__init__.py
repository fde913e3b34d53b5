# 按照依赖顺序导入
from .base import BaseModel
from .auth import User
from .content import Category, Post, Comment
from .media import MediaFile, MediaFolder
from .sys import SiteSetting
