import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import dotenv_values

_TRUTHY = {"1", "true", "yes", "y", "on"}


def _env_bool(values: Mapping[str, Optional[str]], name: str, default: bool) -> bool:
    raw = values.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


def _env_str(values: Mapping[str, Optional[str]], name: str, default: str) -> str:
    raw = values.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = "localhost"
    port: str = "3000"
    log_level: str = "INFO"
    log_colors: bool = True
    seed_data: bool = True

    @property
    def bind_address(self) -> str:
        return f"{self.host}:{self.port}"

    @staticmethod
    def from_env(
        env_file: Union[str, Path, None] = ".env",
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        # .env is optional; real environment variables take precedence over it.
        values = {}
        if env_file is not None and Path(env_file).is_file():
            values.update(dotenv_values(env_file))
        values.update(os.environ if environ is None else environ)

        return Settings(
            host=_env_str(values, "HOST", "localhost"),
            port=_env_str(values, "PORT", "3000"),
            log_level=_env_str(values, "LOG_LEVEL", "INFO").upper(),
            log_colors=_env_bool(values, "LOG_COLORS", True),
            seed_data=_env_bool(values, "SEED_DATA", True),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
