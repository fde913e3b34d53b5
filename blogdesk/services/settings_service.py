"""
站点设置服务
设置由固定分区组成，每个分区是一组标量字段；
保存的快照在顶层浅合并到内置默认值之上，字段值不做类型或范围校验。
"""
import copy
from flask import current_app
from blogdesk.exceptions import ValidationError
from blogdesk.storage import get_settings_store
from blogdesk.storage.defaults import DEFAULT_SETTINGS
from blogdesk.utils.dates import now_iso

SECTIONS = tuple(DEFAULT_SETTINGS)


class SettingsService:

    @staticmethod
    def defaults():
        return copy.deepcopy(DEFAULT_SETTINGS)

    @staticmethod
    def _check_section(section):
        if section not in SECTIONS:
            raise ValidationError(f'Unknown settings section: {section}')

    @staticmethod
    def _save(settings):
        get_settings_store().save(settings)
        return settings

    @staticmethod
    def get_all():
        """读取快照并与默认值合并；首次读取时写入默认值"""
        saved = get_settings_store().load()
        settings = SettingsService.defaults()
        if saved is None:
            return SettingsService._save(settings)
        settings.update(saved)
        return settings

    @staticmethod
    def get_section(section):
        SettingsService._check_section(section)
        return SettingsService.get_all()[section]

    @staticmethod
    def update_all(new_settings):
        """整体替换快照，未知分区被丢弃"""
        if not isinstance(new_settings, dict):
            raise ValidationError('Settings must be an object')
        settings = {}
        for section, values in new_settings.items():
            if section not in SECTIONS:
                current_app.logger.warning(f'忽略未知设置分区: {section}')
                continue
            if not isinstance(values, dict):
                raise ValidationError(f'Settings section {section} must be an object')
            settings[section] = dict(values)
        SettingsService._save(settings)
        return SettingsService.get_all()

    @staticmethod
    def update_section(section, updates):
        """分区浅合并：updates 覆盖同名字段，其他分区不变"""
        SettingsService._check_section(section)
        if not isinstance(updates, dict):
            raise ValidationError(f'Settings section {section} must be an object')
        settings = SettingsService.get_all()
        settings[section] = {**settings[section], **updates}
        return SettingsService._save(settings)

    @staticmethod
    def update_setting(section, key, value):
        SettingsService._check_section(section)
        settings = SettingsService.get_all()
        settings[section] = {**settings[section], key: value}
        return SettingsService._save(settings)

    @staticmethod
    def reset():
        current_app.logger.info('设置已全部恢复默认值')
        return SettingsService._save(SettingsService.defaults())

    @staticmethod
    def reset_section(section):
        SettingsService._check_section(section)
        settings = SettingsService.get_all()
        settings[section] = copy.deepcopy(DEFAULT_SETTINGS[section])
        current_app.logger.info(f'设置分区 {section} 已恢复默认值')
        return SettingsService._save(settings)

    @staticmethod
    def backup():
        return {
            'backup': SettingsService.get_all(),
            'timestamp': now_iso(),
            'message': 'Settings backup created successfully',
        }

    @staticmethod
    def restore(backup):
        if not backup:
            raise ValidationError('Backup data is required')
        return SettingsService.update_all(backup)
