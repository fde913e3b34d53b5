"""站点设置 API"""
from flask import jsonify, request
from . import settings_bp
from blogdesk.exceptions import ValidationError
from blogdesk.services.settings_service import SettingsService
from blogdesk.utils.decorators import api_errors, json_payload

_MISSING = object()


@settings_bp.route('', methods=['GET'])
@api_errors('Failed to fetch settings')
def get_settings():
    """?section=general 只返回单个分区"""
    section = request.args.get('section')
    if section:
        return jsonify({section: SettingsService.get_section(section), 'success': True})
    return jsonify({'settings': SettingsService.get_all(), 'success': True})


@settings_bp.route('', methods=['PUT'])
@api_errors('Failed to update settings')
def update_settings():
    """
    {action: 'reset', section?}  恢复默认值 (单个分区或全部)
    {section, settings}          分区浅合并
    {settings}                   整体替换
    """
    body = json_payload()
    section = body.get('section')
    new_settings = body.get('settings')

    if body.get('action') == 'reset':
        settings = SettingsService.reset_section(section) if section else SettingsService.reset()
    elif section and new_settings is not None:
        settings = SettingsService.update_section(section, new_settings)
    elif new_settings is not None:
        settings = SettingsService.update_all(new_settings)
    else:
        raise ValidationError('Invalid request body')

    return jsonify({'settings': settings, 'success': True, 'message': 'Settings updated successfully'})


@settings_bp.route('', methods=['POST'])
@api_errors('Failed to process settings action')
def settings_action():
    """action: updateSetting / backup / restore"""
    body = json_payload()
    action = body.get('action')

    if action == 'updateSetting':
        section = body.get('section')
        key = body.get('key')
        value = body.get('value', _MISSING)
        if not section or not key or value is _MISSING:
            raise ValidationError('Section, key, and value are required')
        settings = SettingsService.update_setting(section, key, value)
        return jsonify({'settings': settings, 'success': True, 'message': 'Setting updated successfully'})

    if action == 'backup':
        return jsonify({**SettingsService.backup(), 'success': True})

    if action == 'restore':
        settings = SettingsService.restore(body.get('backup'))
        return jsonify({'settings': settings, 'success': True, 'message': 'Settings restored successfully'})

    raise ValidationError('Invalid action')
