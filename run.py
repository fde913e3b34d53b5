import os
from blogdesk import create_app, db
from blogdesk.models import (
    Category, Post, Comment,
    MediaFile, MediaFolder,
    User, SiteSetting
)

# 从环境变量获取配置模式
# 支持 FLASK_ENV 或 FLASK_CONFIG
config_name = os.getenv('FLASK_ENV') or os.getenv('FLASK_CONFIG') or 'default'
if config_name in ('development', 'dev'):
    config_name = 'development'

app = create_app(config_name)


@app.shell_context_processor
def make_shell_context():
    """
    配置 Flask Shell 上下文。
    允许在命令行中使用 'flask shell' 时自动导入 db 和各模型。
    """
    return dict(
        db=db,
        app=app,
        Category=Category,
        Post=Post,
        Comment=Comment,
        MediaFile=MediaFile,
        MediaFolder=MediaFolder,
        User=User,
        SiteSetting=SiteSetting,
    )


if __name__ == '__main__':
    print("-------------------------------------------------------")
    print("   BLOGDESK ADMIN + SITE API                           ")
    print(f"   Storage backend: {app.config['STORAGE_BACKEND']:<33}")
    print("   Target: Localhost:5000                              ")
    print("-------------------------------------------------------")
    app.run(host='0.0.0.0', port=5000)
