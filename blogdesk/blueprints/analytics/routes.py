"""后台统计 API"""
from flask import jsonify, request
from . import analytics_bp
from blogdesk.services.analytics_service import AnalyticsService
from blogdesk.utils.decorators import api_errors


@analytics_bp.route('', methods=['GET'])
@api_errors('Failed to fetch analytics')
def get_analytics():
    """?range=7d|30d|90d (默认 30d)"""
    analytics = AnalyticsService.get_analytics(request.args.get('range'))
    return jsonify({**analytics, 'success': True})
