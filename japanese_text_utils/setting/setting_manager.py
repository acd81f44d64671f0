"""設定関連の処理"""

from dataclasses import dataclass
from enum import Enum
from logging import getLogger
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from .model import FuriganaFormat, NameOrder

logger = getLogger(__name__)


@dataclass(frozen=True)
class Setting:
    """検証・整形処理の設定情報"""

    name_max_display_width: int = 20  # 姓・名それぞれの最大表示幅
    katakana_name_max_display_width: int = 40  # カタカナ氏名の最大表示幅
    truncate_ellipsis: str = "..."  # 省略時に末尾へ付ける文字列
    furigana_format: FuriganaFormat = FuriganaFormat.parentheses  # ふりがなの表記形式
    name_order: NameOrder = NameOrder.family_first  # 氏名の表示順


_setting_adapter = TypeAdapter(Setting)


class SettingLoadError(Exception):
    """設定ファイルに起因するエラー"""

    pass


class SettingHandler:
    def __init__(self, setting_file_path: Path) -> None:
        """
        設定ファイルの管理
        Parameters
        ----------
        setting_file_path : Path
            設定ファイルのパス。存在しない場合はデフォルト値を設定。
        """
        self.setting_file_path = setting_file_path

    def load(self) -> Setting:
        """設定値をファイルから読み込む。"""
        if not self.setting_file_path.is_file():
            logger.info(
                "設定ファイルが見つからないためデフォルト値を使用します: %s",
                self.setting_file_path,
            )
            return Setting()

        try:
            setting = yaml.safe_load(self.setting_file_path.read_text(encoding="utf-8"))
        except OSError:
            raise SettingLoadError("設定ファイルの読み込みに失敗しました")
        except yaml.YAMLError:
            raise SettingLoadError("設定ファイルのパースに失敗しました")

        if setting is None:
            # 空の設定ファイルはデフォルト値とみなす
            logger.info(
                "設定ファイルが空のためデフォルト値を使用します: %s",
                self.setting_file_path,
            )
            return Setting()

        try:
            loaded = _setting_adapter.validate_python(setting)
        except ValidationError:
            raise SettingLoadError("設定ファイルにミスがあります")

        logger.info("設定ファイルを読み込みました: %s", self.setting_file_path)
        return loaded

    def save(self, settings: Setting) -> None:
        """設定値をファイルへ書き込む。"""
        settings_dict: dict[str, Any] = _setting_adapter.dump_python(settings)

        for key, value in settings_dict.items():
            if isinstance(value, Enum):
                settings_dict[key] = value.value

        with open(self.setting_file_path, mode="w", encoding="utf-8") as f:
            yaml.safe_dump(settings_dict, f, allow_unicode=True)
        logger.info("設定ファイルを書き込みました: %s", self.setting_file_path)
