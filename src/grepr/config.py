"""Configuration loading and resolution for grepr."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from grepr.matcher import MatchMode
from grepr.render import COLOR_CHOICES

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class ConfigError(Exception):
    """Raised when a configuration file or value is invalid."""


@dataclass
class SearchConfig:
    """Default matching behavior."""

    ignore_case: bool = False
    mode: str = MatchMode.SUBSTRING.value


@dataclass
class OutputConfig:
    """Result rendering configuration."""

    color: str = "auto"
    line_number_base: int = 0


@dataclass
class GreprConfig:
    """Complete grepr configuration."""

    search: SearchConfig = field(default_factory=SearchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def default_mode(self) -> MatchMode:
        return MatchMode(self.search.mode)


def load_config(
    project_path: Path | None = None, cli_overrides: dict[str, Any] | None = None
) -> GreprConfig:
    """
    Load configuration with priority order (highest to lowest):
    1. CLI args (via cli_overrides)
    2. .grepr.toml in the project directory
    3. ~/.config/grepr/config.toml (user-global)
    4. Built-in defaults

    Args:
        project_path: Directory to look for .grepr.toml in
        cli_overrides: Dictionary of CLI overrides (e.g., {"output": {"color": "never"}})

    Returns:
        Fully resolved GreprConfig

    Raises:
        ConfigError: If a file is not valid TOML or a value is out of range
    """
    config = GreprConfig()

    user_config_path = Path.home() / ".config" / "grepr" / "config.toml"
    if user_config_path.exists():
        _merge_config_from_file(config, user_config_path)

    if project_path:
        project_config_path = project_path / ".grepr.toml"
        if project_config_path.exists():
            _merge_config_from_file(config, project_config_path)

    if cli_overrides:
        _merge_config_from_dict(config, cli_overrides)

    _validate(config)
    return config


def _merge_config_from_file(config: GreprConfig, path: Path) -> None:
    """Load TOML file and merge into existing config."""
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read config file {path}: {e.strerror or e}"
        raise ConfigError(msg) from e
    _merge_config_from_dict(config, data)


def _merge_config_from_dict(config: GreprConfig, data: dict[str, Any]) -> None:
    """Merge dictionary data into config object."""
    if "search" in data:
        search_data = _section(data, "search")
        if "ignore_case" in search_data:
            config.search.ignore_case = search_data["ignore_case"]
        if "mode" in search_data:
            config.search.mode = search_data["mode"]

    if "output" in data:
        output_data = _section(data, "output")
        if "color" in output_data:
            config.output.color = output_data["color"]
        if "line_number_base" in output_data:
            config.output.line_number_base = output_data["line_number_base"]


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data[name]
    if not isinstance(section, dict):
        msg = f"[{name}] must be a table, got {section!r}"
        raise ConfigError(msg)
    return section


def _validate(config: GreprConfig) -> None:
    modes = [m.value for m in MatchMode]
    if config.search.mode not in modes:
        msg = f"Invalid search mode: {config.search.mode!r}. Must be one of {', '.join(modes)}."
        raise ConfigError(msg)
    if not isinstance(config.search.ignore_case, bool):
        msg = f"search.ignore_case must be true or false, got {config.search.ignore_case!r}"
        raise ConfigError(msg)
    if config.output.color not in COLOR_CHOICES:
        choices = ", ".join(COLOR_CHOICES)
        msg = f"Invalid color choice: {config.output.color!r}. Must be one of {choices}."
        raise ConfigError(msg)
    base = config.output.line_number_base
    if type(base) is not int or base not in (0, 1):
        msg = f"output.line_number_base must be 0 or 1, got {base!r}"
        raise ConfigError(msg)
