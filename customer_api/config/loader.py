"""Layered TOML configuration.

``default.toml`` is always read. ``{CUSTOMER_API_ENV}.toml`` from the same
directory is merged over it when present.
"""

import os
import tomllib
from functools import reduce
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "CUSTOMER_API_CONFIG_DIR"
ENVIRONMENT_ENV = "CUSTOMER_API_ENV"
DEFAULT_ENVIRONMENT = "development"

# Directories searched for config/, starting at the working directory
_SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Locate the configuration directory.

    CUSTOMER_API_CONFIG_DIR wins and must exist. Otherwise the nearest
    ``config/`` directory at or above the working directory is used.
    """
    explicit = os.environ.get(CONFIG_DIR_ENV)
    if explicit:
        path = Path(explicit)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {explicit}")
        return path

    cwd = Path.cwd()
    for candidate in [cwd, *cwd.parents][:_SEARCH_DEPTH]:
        if (candidate / "config").is_dir():
            return candidate / "config"

    return Path("config")


def get_environment() -> str:
    """Deployment environment name, normalised to lower case."""
    return os.environ.get(ENVIRONMENT_ENV, "").strip().lower() or DEFAULT_ENVIRONMENT


def load_toml(file_path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` merged in; neither input is mutated."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_layers(config_dir: Path, environment: str) -> list[Path]:
    """Files to merge, lowest precedence first.

    Raises:
        FileNotFoundError: If ``default.toml`` is missing
    """
    default_path = config_dir / "default.toml"
    if not default_path.exists():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            f"Create config/default.toml or set {CONFIG_DIR_ENV}."
        )

    layers = [default_path]
    env_path = config_dir / f"{environment}.toml"
    if environment != "default" and env_path.exists():
        layers.append(env_path)
    return layers


def load_config() -> dict[str, Any]:
    """Load and merge the configuration layers for the current environment."""
    layers = config_layers(get_config_dir(), get_environment())
    return reduce(deep_merge, (load_toml(path) for path in layers), {})
