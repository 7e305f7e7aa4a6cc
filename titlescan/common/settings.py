# titlescan/common/settings.py
from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class ParserConfig(BaseModel):
    # Scanners built without DVD navigation never print "+ angle(s)" lines.
    angle_detection: bool = True
    # Skip the scanner's progress log that precedes the first "+" line.
    skip_preamble: bool = True
    # Run the title checks after parsing and log what they find.
    check_titles: bool = True

    @field_validator("*", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v, default=True)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "titlescan"
    app_env: str = "development"  # development|test|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    parser: ParserConfig = ParserConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from titlescan.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
