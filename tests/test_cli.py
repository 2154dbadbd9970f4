# test_cli.py
import json

import pytest
from click.testing import CliRunner

from die_parser.cli import app


@pytest.fixture
def runner(isolated_cwd):
    return CliRunner()


def _invoke(runner, *args):
    return runner.invoke(app, ["--log-level", "NONE", *args])


def test_parse_joined_words(runner):
    res = _invoke(runner, "parse", "4d20", "-", "5")
    assert res.exit_code == 0, res.output
    assert res.output.strip() == "4d20-5 -> dice=4 sides=20 modifier=-5"


def test_parse_negative_modifier_is_not_an_option(runner):
    res = _invoke(runner, "parse", "4d20", "-5")
    assert res.exit_code == 0, res.output
    assert "modifier=-5" in res.output


def test_parse_json(runner):
    res = _invoke(runner, "parse", "3d10+2", "--json")
    assert res.exit_code == 0, res.output
    assert json.loads(res.stdout) == {"number_of_sides": 10, "number_of_dice": 3, "modifier": 2}


def test_parse_error_exit_code(runner):
    res = _invoke(runner, "parse", "1d50")
    assert res.exit_code == 1
    assert "The requested type of die is invalid." in res.output


def test_parse_error_json(runner):
    res = _invoke(runner, "parse", "0d20", "--json")
    assert res.exit_code == 1
    assert json.loads(res.stdout) == {
        "error": "no_dice_to_roll",
        "message": "Can't roll less than 1 die.",
    }


def test_max_dice_option(runner):
    assert _invoke(runner, "parse", "101d20").exit_code == 1
    assert _invoke(runner, "parse", "101d20", "--max-dice", "0").exit_code == 0
    assert _invoke(runner, "parse", "5d6", "--max-dice", "4").exit_code == 1


def test_max_dice_from_settings(runner, monkeypatch):
    monkeypatch.setenv("DIE_PARSER_MAX_DICE", "10")
    assert _invoke(runner, "parse", "11d6").exit_code == 1
    assert _invoke(runner, "parse", "10d6").exit_code == 0


def test_dice_types(runner):
    res = _invoke(runner, "dice-types")
    assert res.exit_code == 0
    assert res.output.strip() == "d2 d4 d6 d8 d10 d12 d20 d100"
