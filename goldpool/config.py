from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class FlaskSettings:
    secret_key: str = "goldpool-dev-secret"
    debug: bool = True


@dataclass(frozen=True)
class WheelSettings:
    pointer_angle: float = 0.0
    min_turns: float = 2.0
    max_turns: float = 5.0


@dataclass(frozen=True)
class AppSettings:
    flask: FlaskSettings
    wheel: WheelSettings
    database_url: str
    admin_api_key: Optional[str]
    language: str = "tr"


def _float_from_env(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable {key} must be a number, got {value!r}") from exc


@lru_cache(maxsize=1)
def load_settings(dotenv_path: Optional[str] = None) -> AppSettings:
    if dotenv_path:
        load_dotenv(dotenv_path)
    else:
        load_dotenv()

    flask_settings = FlaskSettings(
        secret_key=os.getenv("FLASK_SECRET_KEY", "goldpool-dev-secret"),
        debug=os.getenv("FLASK_DEBUG", "1") == "1",
    )

    wheel_settings = WheelSettings(
        pointer_angle=_float_from_env("WHEEL_POINTER_ANGLE", 0.0),
        min_turns=_float_from_env("SPIN_MIN_TURNS", 2.0),
        max_turns=_float_from_env("SPIN_MAX_TURNS", 5.0),
    )
    if wheel_settings.min_turns < 0 or wheel_settings.max_turns < wheel_settings.min_turns:
        raise RuntimeError("SPIN_MIN_TURNS/SPIN_MAX_TURNS must satisfy 0 <= min <= max")

    database_url = os.getenv("DATABASE_URL", "sqlite:///goldpool.db")
    admin_api_key = os.getenv("ADMIN_API_KEY")
    language = os.getenv("GOLDPOOL_LANGUAGE", "tr")

    return AppSettings(
        flask=flask_settings,
        wheel=wheel_settings,
        database_url=database_url,
        admin_api_key=admin_api_key,
        language=language,
    )
