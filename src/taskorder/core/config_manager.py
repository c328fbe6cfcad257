from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional

from dotenv import load_dotenv

from taskorder.core.errors import ConfigurationError
from taskorder.logger import LOG_LEVELS, get_logger

logger = get_logger(__name__)

DEFAULT_MAX_TASKS = 50
DEFAULT_LOG_LEVEL = "WARNING"

ENV_MAX_TASKS = "TASKORDER_MAX_TASKS"
ENV_LOG_LEVEL = "TASKORDER_LOG_LEVEL"


def _parse_max_tasks(value: object) -> int:
    try:
        max_tasks = int(value)
    except (TypeError, ValueError):
        max_tasks = 0
    if isinstance(value, bool) or max_tasks < 1:
        raise ConfigurationError(
            f"Invalid task limit: {value!r}",
            what=f"Invalid task limit {value!r}",
            why="The task limit must be a positive integer",
            how_to_fix=f"Set {ENV_MAX_TASKS} to a number such as {DEFAULT_MAX_TASKS}",
        )
    return max_tasks


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level: {value!r}",
            what=f"Invalid log level {value!r}",
            why=f"Supported levels are {', '.join(LOG_LEVELS)}",
            how_to_fix=f"Set {ENV_LOG_LEVEL} to one of the supported levels",
        )
    return level


@dataclass
class ConfigManager:
    """
    Typed configuration for schedule resolution.

    Values come from explicit setters first, then environment variables
    (optionally loaded from a .env file), then defaults.

    Usage examples
    --------------
        from taskorder.core.config_manager import get_config_manager

        cm = get_config_manager()
        cm.load_env_files([Path.cwd() / ".env"], override=False)
        cm.set_max_tasks(100)
        cm.get_log_level()
    """

    _overrides: Dict[str, object] = field(default_factory=dict)

    def load_env_files(self, paths: Iterable[Path], override: bool = False) -> Optional[Path]:
        """Load the first existing .env file from the provided paths."""
        for env_path in paths:
            if env_path.exists():
                load_dotenv(env_path, override=override)
                logger.debug("Loaded .env file from %s", env_path)
                return env_path
        return None

    def set_max_tasks(self, max_tasks: int) -> None:
        self._overrides["max_tasks"] = _parse_max_tasks(max_tasks)

    def get_max_tasks(self) -> int:
        """Soft task limit; resolving more tasks than this logs a warning."""
        if "max_tasks" in self._overrides:
            return self._overrides["max_tasks"]
        raw = os.environ.get(ENV_MAX_TASKS)
        if raw is None or raw.strip() == "":
            return DEFAULT_MAX_TASKS
        return _parse_max_tasks(raw)

    def set_log_level(self, level: str) -> None:
        self._overrides["log_level"] = _parse_log_level(level)

    def get_log_level(self) -> str:
        if "log_level" in self._overrides:
            return self._overrides["log_level"]
        raw = os.environ.get(ENV_LOG_LEVEL)
        if raw is None or raw.strip() == "":
            return DEFAULT_LOG_LEVEL
        return _parse_log_level(raw)

    def as_dict(self) -> Dict[str, object]:
        return {
            "max_tasks": self.get_max_tasks(),
            "log_level": self.get_log_level(),
        }

    def clear(self) -> None:
        self._overrides.clear()


_config_manager = ConfigManager()


def get_config_manager() -> ConfigManager:
    return _config_manager


__all__ = ["ConfigManager", "get_config_manager"]
