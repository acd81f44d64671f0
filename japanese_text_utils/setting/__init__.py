from .model import FuriganaFormat, NameOrder
from .setting_manager import Setting, SettingHandler, SettingLoadError

__all__ = [
    "FuriganaFormat",
    "NameOrder",
    "Setting",
    "SettingHandler",
    "SettingLoadError",
]
