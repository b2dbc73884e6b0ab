"""
Configuration management for dockpeek.

Defaults live in dataclasses; a YAML file passed with `--config` can override
any known key. Nothing is read from disk unless a path is given.

Sections:
- keybindings: quit/focus/select/refresh keys (Textual key names)
- theme: Rich style strings used by the renderer
- runtime: which CLI binary to invoke
- logging: level and log file rotation
"""

import logging
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from rich.color import ColorParseError
from rich.errors import StyleError
from rich.style import Style

logger = logging.getLogger(__name__)


@dataclass
class KeyBindings:
    """Keys intercepted before input reaches the focused pane."""
    quit: Tuple[str, ...] = ("q", "ctrl+c")
    focus_next: str = "tab"
    select: str = "enter"
    refresh: str = "r"

    def is_quit(self, key: str) -> bool:
        return key in self.quit


@dataclass
class Theme:
    """Colours and styles handed to the renderer."""
    focused_border: str = "color(99)"
    blurred_border: str = "color(241)"
    title: str = "bold color(205)"
    table_header: str = "bold color(39)"
    selected_row: str = "bold color(42)"
    hint: str = "color(241)"
    error: str = "bold red"


@dataclass
class RuntimeConfig:
    binary: str = "docker"


@dataclass
class LogConfig:
    level: str = "INFO"
    file_path: Optional[str] = None  # None for default
    max_size_mb: int = 10
    backup_count: int = 5


@dataclass
class AppConfig:
    keybindings: KeyBindings = field(default_factory=KeyBindings)
    theme: Theme = field(default_factory=Theme)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    logging: LogConfig = field(default_factory=LogConfig)


def _accepts(current: Any, value: Any) -> bool:
    """True if `value` may replace `current` (the field's default)."""
    if current is None:
        return value is None or isinstance(value, str)
    if isinstance(current, bool):
        return isinstance(value, bool)
    if isinstance(current, int):
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, type(current))


def _merge_dataclass(obj: Any, updates: Dict[str, Any], prefix: str = "") -> None:
    """Merge updates into a (possibly nested) dataclass, ignoring unknown or mistyped keys."""
    known = {f.name for f in fields(obj)}
    for key, value in updates.items():
        name = f"{prefix}{key}"
        if key not in known:
            logger.warning(f"Ignoring unknown config key: {name}")
            continue
        current = getattr(obj, key)
        if is_dataclass(current):
            if isinstance(value, dict):
                _merge_dataclass(current, value, prefix=f"{name}.")
            else:
                logger.error(f"Config section {name} must be a mapping, keeping defaults")
        elif isinstance(current, tuple) and isinstance(value, (list, tuple)):
            setattr(obj, key, tuple(str(v) for v in value))
        elif isinstance(current, tuple) and isinstance(value, str):
            setattr(obj, key, (value,))
        elif _accepts(current, value):
            setattr(obj, key, value)
        else:
            logger.error(
                f"Config key {name} expects {type(current).__name__}, "
                f"got {value!r}; keeping {current!r}"
            )


def _validate_theme(theme: Theme) -> None:
    defaults = Theme()
    for f in fields(theme):
        value = getattr(theme, f.name)
        try:
            Style.parse(value)
        except (StyleError, ColorParseError) as e:
            default = getattr(defaults, f.name)
            logger.error(f"Invalid style for theme.{f.name}: {e}; keeping {default!r}")
            setattr(theme, f.name, default)


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """
    Build the application config.

    Without a path the defaults are returned. With a path the YAML mapping is
    merged over the defaults; a missing or invalid file is logged and the
    defaults are used.
    """
    config = AppConfig()
    if path is None:
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load config {path}: {e}, using defaults")
        return AppConfig()

    if not isinstance(user_config, dict):
        logger.error(f"Config {path} is not a mapping, using defaults")
        return AppConfig()

    _merge_dataclass(config, user_config)
    _validate_theme(config.theme)
    logger.debug(f"Loaded configuration from {path}")
    return config
