from PyQt6.QtCore import QSettings
from PyQt6.QtGui import QColor

class SettingsManager:
    def __init__(self, organization="PixelPainterOrg", application="PixelPainter", path=None):
        # 指定 path 时使用 ini 文件，便于测试与便携模式
        if path is not None:
            self.settings = QSettings(str(path), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings(organization, application)

    @staticmethod
    def get_defaults():
        return {
            "selection_color": QColor(0, 120, 215),
            "selection_alpha": 0.45,
            "canvas_width": 512,
            "canvas_height": 512,
            "undo_limit": 0,  # 0 表示不限制
        }

    def load_settings(self):
        defaults = self.get_defaults()
        settings = {}

        color_str = self.settings.value("selection/color", defaults["selection_color"].name())
        settings["selection_color"] = QColor(color_str)

        settings["selection_alpha"] = float(self.settings.value("selection/alpha", defaults["selection_alpha"]))
        settings["canvas_width"] = int(self.settings.value("canvas/width", defaults["canvas_width"]))
        settings["canvas_height"] = int(self.settings.value("canvas/height", defaults["canvas_height"]))
        settings["undo_limit"] = int(self.settings.value("history/undo_limit", defaults["undo_limit"]))
        return settings

    def save_settings(self, settings):
        self.settings.setValue("selection/color", settings["selection_color"].name())
        self.settings.setValue("selection/alpha", settings["selection_alpha"])
        self.settings.setValue("canvas/width", settings["canvas_width"])
        self.settings.setValue("canvas/height", settings["canvas_height"])
        if "undo_limit" in settings:
            self.settings.setValue("history/undo_limit", settings["undo_limit"])
        self.settings.sync()


def resolve_settings(settings=None):
    """缺省项用默认值补齐。"""
    resolved = SettingsManager.get_defaults()
    if settings: resolved.update(settings)
    return resolved
