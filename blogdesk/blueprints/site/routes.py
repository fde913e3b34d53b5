"""前台站点 API (只读，已发布内容)"""
from flask import jsonify, request
from . import site_bp
from blogdesk.services.site_service import SiteService, FEATURED_POSTS_COUNT, RELATED_POSTS_COUNT
from blogdesk.utils.decorators import api_errors


@site_bp.route('/posts')
@api_errors('Failed to fetch posts')
def posts():
    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', type=int)
    return jsonify({**SiteService.list_posts(page, per_page), 'success': True})


@site_bp.route('/posts/<slug>')
@api_errors('Failed to fetch post')
def post_detail(slug):
    """文章详情：附带渲染后的 HTML，并增加阅读数"""
    return jsonify({'post': SiteService.get_post(slug), 'success': True})


@site_bp.route('/posts/<slug>/related')
@api_errors('Failed to fetch related posts')
def related_posts(slug):
    limit = request.args.get('limit', RELATED_POSTS_COUNT, type=int)
    posts = SiteService.related_posts(slug, limit)
    return jsonify({'posts': posts, 'total': len(posts), 'success': True})


@site_bp.route('/featured')
@api_errors('Failed to fetch featured posts')
def featured():
    limit = request.args.get('limit', FEATURED_POSTS_COUNT, type=int)
    posts = SiteService.featured_posts(limit)
    return jsonify({'posts': posts, 'total': len(posts), 'success': True})


@site_bp.route('/categories')
@api_errors('Failed to fetch categories')
def categories():
    items = SiteService.categories()
    return jsonify({'categories': items, 'total': len(items), 'success': True})


@site_bp.route('/categories/<slug>')
@api_errors('Failed to fetch category posts')
def category_posts(slug):
    posts = SiteService.posts_by_category(slug)
    return jsonify({'category': slug, 'posts': posts, 'total': len(posts), 'success': True})


@site_bp.route('/tags')
@api_errors('Failed to fetch tags')
def tags():
    items = SiteService.tags()
    return jsonify({'tags': items, 'total': len(items), 'success': True})


@site_bp.route('/tags/<slug>')
@api_errors('Failed to fetch tag posts')
def tag_posts(slug):
    posts = SiteService.posts_by_tag(slug)
    return jsonify({'tag': slug, 'posts': posts, 'total': len(posts), 'success': True})


@site_bp.route('/search')
@api_errors('Search failed')
def search():
    query = request.args.get('q', '')
    posts = SiteService.search(query)
    return jsonify({'query': query, 'posts': posts, 'total': len(posts), 'success': True})
