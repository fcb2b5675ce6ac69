from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_NAME = ".env"


class Settings(BaseSettings):
    LANG_BUNDLE: str = "messages"
    LANG_BUNDLE_DIR: Path = Path("locales")
    DEFAULT_LANG: str = ""  # empty selects the default bundle
    LANG_FILE_ENCODING: str = "utf-8"
    SWEEPERS_THRESHOLD: int = 0  # 0 disables the sweeper

    @field_validator("DEFAULT_LANG", mode="before")
    @classmethod
    def strip_default_lang(cls, v):  # type: ignore
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("SWEEPERS_THRESHOLD", mode="after")
    @classmethod
    def clamp_threshold(cls, v: int) -> int:
        return max(v, 0)

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


def load_settings(env_file: Optional[Union[str, Path]] = None) -> Settings:
    """Load .env into the process environment, then read Settings from it.

    Called by the embedding application at startup; importing this module
    leaves the environment alone.
    """
    path = Path(env_file) if env_file is not None else Path.cwd() / ENV_FILE_NAME
    load_dotenv(path)
    return Settings(_env_file=None)
