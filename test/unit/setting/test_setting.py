import logging
from pathlib import Path

import pytest

from japanese_text_utils.setting import (
    FuriganaFormat,
    NameOrder,
    Setting,
    SettingHandler,
    SettingLoadError,
)


def test_setting_handler_load_not_exist_file(tmp_path: Path) -> None:
    """`SettingHandler` に存在しない設定ファイルのパスを渡すとデフォルト値になる。"""
    # Inputs
    setting_loader = SettingHandler(tmp_path / "not_exist.yaml")
    # Expects
    true_setting = Setting(
        name_max_display_width=20,
        katakana_name_max_display_width=40,
        truncate_ellipsis="...",
        furigana_format=FuriganaFormat.parentheses,
        name_order=NameOrder.family_first,
    )
    # Outputs
    setting = setting_loader.load()
    # Test
    assert true_setting == setting


def test_setting_handler_load_exist_file(tmp_path: Path) -> None:
    """`SettingHandler` に設定ファイルのパスを渡すとその値を読み込む。"""
    # Inputs
    setting_path = tmp_path / "setting.yaml"
    setting_path.write_text(
        "name_max_display_width: 30\nfurigana_format: html\ntruncate_ellipsis: …\n",
        encoding="utf-8",
    )
    setting_loader = SettingHandler(setting_path)
    # Expects
    true_setting = Setting(
        name_max_display_width=30,
        truncate_ellipsis="…",
        furigana_format=FuriganaFormat.html,
    )
    # Outputs
    setting = setting_loader.load()
    # Test
    assert true_setting == setting


def test_setting_handler_load_empty_file(tmp_path: Path) -> None:
    """`SettingHandler` は空の設定ファイルをデフォルト値として読み込む。"""
    # Inputs
    setting_path = tmp_path / "setting.yaml"
    setting_path.write_text("", encoding="utf-8")
    # Outputs
    setting = SettingHandler(setting_path).load()
    # Test
    assert Setting() == setting


def test_setting_handler_load_broken_yaml(tmp_path: Path) -> None:
    """`SettingHandler` はパースできない設定ファイルに対してエラーを送出する。"""
    # Inputs
    setting_path = tmp_path / "setting.yaml"
    setting_path.write_text("name_max_display_width: [", encoding="utf-8")
    # Tests
    with pytest.raises(SettingLoadError, match="設定ファイルのパースに失敗しました"):
        SettingHandler(setting_path).load()


def test_setting_handler_load_invalid_value(tmp_path: Path) -> None:
    """`SettingHandler` は不正な値を含む設定ファイルに対してエラーを送出する。"""
    # Inputs
    setting_path = tmp_path / "setting.yaml"
    setting_path.write_text("furigana_format: unknown\n", encoding="utf-8")
    # Tests
    with pytest.raises(SettingLoadError, match="設定ファイルにミスがあります"):
        SettingHandler(setting_path).load()


def test_setting_handler_save(tmp_path: Path) -> None:
    """`SettingHandler` で保存した設定値を読み込むと同じ値になる。"""
    # Inputs
    setting_handler = SettingHandler(tmp_path / "setting.yaml")
    true_setting = Setting(
        katakana_name_max_display_width=60,
        name_order=NameOrder.given_first,
        furigana_format=FuriganaFormat.ruby,
    )
    # Outputs
    setting_handler.save(true_setting)
    setting = setting_handler.load()
    # Test
    assert true_setting == setting
    assert "given_first" in (tmp_path / "setting.yaml").read_text(encoding="utf-8")


def test_setting_handler_load_logs_default(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """`SettingHandler` はデフォルト値を使用する場合にログを出力する。"""
    caplog.set_level(logging.INFO, logger="japanese_text_utils")
    SettingHandler(tmp_path / "not_exist.yaml").load()
    assert "デフォルト値を使用します" in caplog.text
