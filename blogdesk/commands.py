import random
import click
from flask import current_app
from flask.cli import with_appcontext
from blogdesk.extensions import db
from blogdesk.storage import COLLECTIONS, get_storage, get_collection
from blogdesk.services.category_service import CategoryService
from blogdesk.services.post_service import PostService
from blogdesk.services.comment_service import CommentService
from blogdesk.utils.fake_gen import fake


@click.command('status')
@with_appcontext
def status():
    """
    [验证指令] 查看当前存储后端中的数据统计。
    """
    backend = current_app.config['STORAGE_BACKEND']
    click.echo(click.style(f'📊 博客存储状态 (后端: {backend}):', fg='cyan', bold=True))

    try:
        counts = {name: get_collection(name).count() for name in COLLECTIONS}
        for name, count in counts.items():
            click.echo(f" - {name}: \t{count}")

        if counts['posts'] > 0:
            click.echo(click.style('✔ 存储可读，数据已存在。', fg='green'))
        else:
            click.echo(click.style('⚠ 暂无文章，请运行 flask forge 生成数据。', fg='yellow'))

    except Exception as e:
        click.echo(click.style(f'✘ 存储读取失败: {str(e)}', fg='red'))
        click.echo("请检查是否执行了 'flask init-db'")


@click.command('init-db')
@click.option('--drop', is_flag=True, help='先删除全部表再重建')
@with_appcontext
def init_db(drop):
    """建表并写入默认数据 (仅 database 后端)"""
    if current_app.config['STORAGE_BACKEND'] != 'database':
        click.echo(click.style('⚠ 当前为 local 后端，无需初始化数据库。', fg='yellow'))
        return
    if drop:
        click.confirm('这将删除数据库中的所有数据，确认继续？', abort=True)
        db.drop_all()
    db.create_all()
    seeded = get_storage().seed_database()
    for name, count in seeded.items():
        click.echo(f" - {name}: 写入 {count} 条")
    click.echo(click.style('✔ 数据库初始化完成！', fg='green', bold=True))


@click.command('forge')
@click.option('--posts', 'post_count', default=10, help='生成文章数量 (默认10篇)')
@click.option('--comments', 'comment_count', default=3, help='每篇文章的最多评论数')
@with_appcontext
def forge(post_count, comment_count):
    """
    [造物主指令] 使用 Faker 生成演示文章与评论。
    通过业务服务写入，因此两种存储后端都适用。
    """
    click.echo(click.style(f'⚡ 正在生成 {post_count} 篇演示文章...', fg='cyan', bold=True))

    categories = CategoryService.get_all()
    statuses = ['published'] * 3 + ['draft', 'archived']
    created_comments = 0

    for _ in range(post_count):
        category = random.choice(categories) if categories else None
        post = PostService.create({
            'title': fake.post_title(),
            'content': fake.post_body(),
            'status': random.choice(statuses),
            'featured': random.random() < 0.2,
            'categoryId': category['id'] if category else None,
            'tags': fake.post_tags(),
        })

        for _ in range(random.randint(0, comment_count)):
            CommentService.create({
                'postId': post['id'],
                'postTitle': post['title'],
                'author': {'name': fake.name(), 'email': fake.email()},
                'content': fake.paragraph(nb_sentences=2),
                'status': random.choice(['approved', 'approved', 'pending', 'spam']),
                'ipAddress': fake.ipv4(),
                'userAgent': fake.user_agent(),
            })
            created_comments += 1

    CategoryService.recompute_post_counts()
    click.echo(click.style('✔ 演示数据生成完成！', fg='green', bold=True))
    click.echo(f"数据统计: {post_count} 篇文章, {created_comments} 条评论")
