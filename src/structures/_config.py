"""Configuration loading from pyproject.toml."""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, NonNegativeInt, ValidationError

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Error in structures configuration."""


class StructuresConfig(BaseModel):
    """Settings read from the ``[tool.structures]`` table.

    Attributes:
        cache_capacity: Capacity used by ``LruCache.from_config``.
        check_weights: Whether shortest-path queries reject negative edge weights.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cache_capacity: NonNegativeInt = 128
    check_weights: bool = True


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(pyproject_path: Path) -> StructuresConfig:
    """Load and validate [tool.structures] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed StructuresConfig (defaults when the table is absent)

    Raises:
        ConfigError: If the file is not valid TOML or the table is invalid

    """
    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("structures", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.structures] configuration: expected a table"
        raise ConfigError(msg)

    try:
        config = StructuresConfig.model_validate(section)
    except ValidationError as e:
        msg = f"Invalid [tool.structures] configuration in {pyproject_path}: {e}"
        raise ConfigError(msg) from e

    logger.debug("Loaded %r from %s", config, pyproject_path)
    return config


def get_config() -> StructuresConfig:
    """Get config from pyproject.toml in current directory or parents."""
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return StructuresConfig()
    return load_config(pyproject_path)
