"""Configuration management with XDG paths and precedence resolution.

This module handles all persistent configuration for expressgen:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.expressgen/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Global config** -- A single :class:`~expressgen.models.GlobalConfig`
  JSON file storing the default port and the dependency versions written
  into generated manifests.
* **Precedence resolution** -- :func:`resolve_config` merges CLI flags,
  environment variables and the global config into the effective
  configuration.

Writes go through :func:`~expressgen.files.atomic_write`.
"""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from expressgen.exceptions import ConfigError
from expressgen.files import atomic_write
from expressgen.models import GlobalConfig

_APP_NAME = "expressgen"
_CONFIG_FILENAME = "config.json"
_PORT_ENV_VAR = "EXPRESSGEN_PORT"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/expressgen/`` (default
    ``~/.config/expressgen/``). On macOS/Windows: ``~/.expressgen/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/expressgen/`` (default
    ``~/.local/share/expressgen/``). On macOS/Windows: ``~/.expressgen/logs/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Global config ---


def _global_config_path() -> Path:
    """Path to the global config file."""
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration from the config directory.

    Returns:
        The deserialised :class:`~expressgen.models.GlobalConfig`. If the
        file does not exist, a default instance is returned.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = _global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return GlobalConfig.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    """Persist the global configuration atomically to disk."""
    data = config.model_dump(mode="json")
    atomic_write(_global_config_path(), json.dumps(data, indent=2) + "\n")


def reset_global_config() -> GlobalConfig:
    """Overwrite the global config file with defaults and return them."""
    config = GlobalConfig()
    save_global_config(config)
    return config


# --- Precedence resolution ---


def resolve_config(cli_port: Optional[int] = None) -> GlobalConfig:
    """Resolve config with the full precedence chain.

    Precedence (high to low):
        1. CLI flags (``cli_port``)
        2. Environment variables (``EXPRESSGEN_PORT``)
        3. User config (``~/.config/expressgen/config.json``)
        4. Defaults

    Raises:
        ConfigError: If the config file is invalid or ``EXPRESSGEN_PORT`` is
            not an integer in range.
    """
    config = load_global_config()

    env_port = os.environ.get(_PORT_ENV_VAR)
    if env_port:
        config.port = _parse_port(env_port, source=_PORT_ENV_VAR)

    if cli_port is not None:
        config.port = _parse_port(str(cli_port), source="--port")

    return config


def _parse_port(value: str, source: str) -> int:
    """Parse and range-check a port number."""
    try:
        port = int(value)
    except ValueError:
        raise ConfigError(f"{source} must be an integer, got: {value}") from None
    if not 1 <= port <= 65535:
        raise ConfigError(f"{source} must be between 1 and 65535, got: {port}")
    return port
