import tomllib
from pathlib import Path
from typing import Annotated

import tomlkit
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from clmath.logging import logger

CONFIG_DIR = Path.home() / ".config" / "clmath"
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_CACHE_SIZE = 1024


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CLMATH_")

    # Maximum number of memoized results held by each cached tick conversion
    cache_size: Annotated[int, Field(ge=0)] = DEFAULT_CACHE_SIZE


def load_config_from_file(config_path: Path) -> Settings:
    logger.debug(f"Loading configuration from {config_path}.")
    return Settings(
        **tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )
    logger.info(f"Saved configuration to {config_path}.")


settings = load_config_from_file(CONFIG_FILE) if CONFIG_FILE.exists() else Settings()
