# test_config.py
import pytest
from pydantic import ValidationError

from die_parser.config import Settings, load_settings


def test_defaults(isolated_cwd):
    s = load_settings()
    assert s.max_dice == 100
    assert s.logging_level == "INFO"
    assert s.logging_console == "INFO"
    assert s.logging_file == "NONE"


def test_env_override(isolated_cwd, monkeypatch):
    monkeypatch.setenv("DIE_PARSER_MAX_DICE", "0")
    monkeypatch.setenv("DIE_PARSER_LOGGING_LEVEL", "DEBUG")
    s = Settings()
    assert s.max_dice == 0
    assert s.logging_level == "DEBUG"


def test_max_dice_bounds(isolated_cwd, monkeypatch):
    monkeypatch.setenv("DIE_PARSER_MAX_DICE", "-1")
    with pytest.raises(ValidationError):
        Settings()
    with pytest.raises(ValidationError):
        Settings(max_dice=70000)


def test_toml_source(isolated_cwd):
    (isolated_cwd / "die_parser.toml").write_text(
        "[parser]\n"
        "max_dice = 250\n"
        "\n"
        "[logging]\n"
        'level = "debug"\n'
        "console = false\n"
        "to_file = true\n"
        'file_path = "out/rolls.jsonl"\n'
        "backup_count = 2\n"
    )
    s = Settings()
    assert s.max_dice == 250
    assert s.logging_level == "DEBUG"
    assert s.logging_console == "NONE"
    assert s.logging_file == "DEBUG"
    assert s.logging_file_path == "out/rolls.jsonl"
    assert s.logging_backup_count == 2


def test_precedence(isolated_cwd, monkeypatch):
    (isolated_cwd / "die_parser.toml").write_text("[parser]\nmax_dice = 250\n")
    monkeypatch.setenv("DIE_PARSER_MAX_DICE", "50")
    assert Settings().max_dice == 50
    assert Settings(max_dice=5).max_dice == 5

    (isolated_cwd / ".env").write_text("DIE_PARSER_MAX_DICE=20\n")
    assert Settings().max_dice == 20
