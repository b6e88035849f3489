"""
Bricks Logging System

Provides leveled, per-module logging for the game core and its pygame
adapters.

Usage:
    from bricks.logging import get_logger

    log = get_logger('level_loader')
    log.debug("Parsing block %d", 3)
    log.info("Loaded level %d", 1)

Configuration:
    Environment variables:
        BRICKS_LOG_LEVEL=DEBUG            # Global default level
        BRICKS_LOG_GAME_MODE=DEBUG        # Module-specific level
        BRICKS_LOG_LEVEL_LOADER=WARNING

    Or programmatically:
        from bricks.logging import configure_logging
        configure_logging(level='DEBUG', modules={'level_loader': 'INFO'})
"""

import os
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Even more verbose than DEBUG
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


_ENV_PREFIX = 'BRICKS_LOG_'

# Global configuration
_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)


def _load_env_config() -> None:
    """Load configuration from environment variables.

    BRICKS_LOG_LEVEL sets the global level; any other BRICKS_LOG_<MODULE>
    variable sets the level of that module (BRICKS_LOG_GAME_MODE=DEBUG ->
    game_mode: DEBUG).
    """
    if 'BRICKS_LOG_LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ['BRICKS_LOG_LEVEL'])

    for key, value in os.environ.items():
        if key.startswith(_ENV_PREFIX) and key != 'BRICKS_LOG_LEVEL':
            module_name = key[len(_ENV_PREFIX):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


# Load env config on import
_load_env_config()


class BricksLogger:
    """
    Logger for a specific module.

    Messages below the module's effective level are dropped before
    formatting.
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if message at given level would be logged."""
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        """Internal log method."""
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(_format_message(self.module, level_name, msg))

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        """Log at DEBUG level."""
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        """Log at INFO level."""
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        """Log at WARNING level."""
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def warn(self, msg: str, *args) -> None:
        """Alias for warning()."""
        self.warning(msg, *args)

    def error(self, msg: str, *args) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        """Log at CRITICAL level."""
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)

    def exception(self, msg: str, *args, exc_info: bool = True) -> None:
        """
        Log an exception with traceback.

        Args:
            msg: Message describing what failed
            exc_info: If True, include current exception traceback
        """
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

        if exc_info:
            tb = traceback.format_exc()
            if tb and tb.strip() != 'NoneType: None':
                for line in tb.strip().split('\n'):
                    self._log(LogLevel.ERROR, 'TRACE', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> BricksLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'game_mode', 'level_loader')

    Returns:
        BricksLogger instance for the module
    """
    return BricksLogger(module)


def enable_all_logging() -> None:
    """Enable DEBUG level for all modules."""
    configure_logging(level='DEBUG')


def disable_logging() -> None:
    """Disable all logging."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
