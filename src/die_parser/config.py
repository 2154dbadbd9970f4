"""Settings loader for die_parser."""

from pathlib import Path
from typing import Any

import tomllib
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_FILE = "die_parser.toml"


def _toml_settings_source() -> dict[str, Any]:
    """Load settings from die_parser.toml with keys mapped to Settings fields.

    Environment variables and .env both win over values read here.
    """
    cfg_path = Path(CONFIG_FILE)
    if not cfg_path.exists():
        return {}
    with cfg_path.open("rb") as f:
        t = tomllib.load(f)

    parser_cfg = t.get("parser", {}) or {}
    log_cfg = t.get("logging", {}) or {}

    out: dict[str, Any] = {}
    if "max_dice" in parser_cfg:
        out["max_dice"] = parser_cfg["max_dice"]

    overall = str(log_cfg.get("level", "INFO")).upper()
    out["logging_level"] = overall

    # console/to_file take a level name, NONE, or a bool (true = overall level)
    def _norm_level(v, default):
        if isinstance(v, str):
            return v.upper()
        if isinstance(v, bool):
            return overall if v else "NONE"
        return default

    out["logging_console"] = _norm_level(log_cfg.get("console"), overall)
    out["logging_file"] = _norm_level(log_cfg.get("to_file"), "NONE")

    for key in ("file_path", "max_bytes", "backup_count"):
        if key in log_cfg:
            out[f"logging_{key}"] = log_cfg[key]

    return out


class Settings(BaseSettings):
    # --- Parser ---
    # Ceiling applied by the CLI when --max-dice is not given; 0 = unbounded
    max_dice: int = Field(default=100, ge=0, le=0xFFFF)

    # --- Logging ---
    logging_level: str = "INFO"
    logging_console: str = "INFO"
    logging_file: str = "NONE"
    logging_file_path: str = "logs/die_parser.jsonl"
    logging_max_bytes: int = 5_000_000
    logging_backup_count: int = 5

    model_config = SettingsConfigDict(
        env_prefix="DIE_PARSER_",
        case_sensitive=False,
        env_file=".env",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Keyword arguments, then .env, then the process environment, then
        # die_parser.toml, then secret files
        return (
            init_settings,
            dotenv_settings,
            env_settings,
            _toml_settings_source,
            file_secret_settings,
        )


def load_settings() -> Settings:
    return Settings()
