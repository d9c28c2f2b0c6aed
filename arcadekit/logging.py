"""
Arcade Kit Logging

Two channels, both keyed by module name:

- Console messages: get_logger(module) returns a GameLogger whose
  trace/debug/info/warning/error/critical calls print
  "[module] LEVEL: message" when the module's level allows it.
- Structured records: emit_record(module, record) hands a JSON-ready dict
  to the sink registered for that module. FileSink appends JSON Lines,
  NullSink discards.

Usage:
    from arcadekit.logging import get_logger, emit_record

    log = get_logger('game_mode')
    log.info("Session %d started", 1)

    emit_record('session', {'type': 'transition', 'to': 'playing'})

Environment:
    ARCADE_LOG_LEVEL=DEBUG                 default console level
    ARCADE_LOG_<MODULE>=TRACE              level for one module
    ARCADE_LOG_DIR=~/arcade-logs           where FileSink writes
    ARCADE_LOGGING_<MODULE>_ENABLED=true   record sink settings per module
"""

import json
import os
import time
import traceback
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, IO, Optional


class LogLevel(IntEnum):
    """Console levels; numeric values line up with the stdlib logging module."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


_LEVEL_NAMES: Dict[str, LogLevel] = {
    'TRACE': LogLevel.TRACE,
    'DEBUG': LogLevel.DEBUG,
    'INFO': LogLevel.INFO,
    'WARNING': LogLevel.WARNING,
    'WARN': LogLevel.WARNING,
    'ERROR': LogLevel.ERROR,
    'CRITICAL': LogLevel.CRITICAL,
    'OFF': LogLevel.OFF,
}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},   # module key -> LogLevel
    'log_dir': None,       # None = ARCADE_LOG_DIR or the XDG data dir
    'modules': {},         # module -> nested record sink settings
}


def _level_from_string(name: str) -> LogLevel:
    """Map a level name to a LogLevel, INFO if unknown."""
    return _LEVEL_NAMES.get(name.strip().upper(), LogLevel.INFO)


def _module_key(module: str) -> str:
    return module.lower().replace('.', '_').replace('/', '_')


def _parse_env_value(value: str) -> Any:
    """Turn an environment string into bool, int, float or str."""
    lowered = value.lower()
    if lowered in ('true', '1', 'yes', 'on'):
        return True
    if lowered in ('false', '0', 'no', 'off'):
        return False
    for convert in (int, float):
        try:
            return convert(value)
        except ValueError:
            continue
    return value


# =============================================================================
# Configuration
# =============================================================================

def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Set console levels programmatically.

    Args:
        level: Default level name for every module
        modules: Optional module name -> level name overrides
    """
    _config['default_level'] = _level_from_string(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][_module_key(module)] = _level_from_string(module_level)


def _load_env_config() -> None:
    """Read ARCADE_LOG_* and ARCADE_LOGGING_* variables into _config."""
    for key, value in os.environ.items():
        if key == 'ARCADE_LOG_LEVEL':
            _config['default_level'] = _level_from_string(value)
        elif key == 'ARCADE_LOG_DIR':
            _config['log_dir'] = value
        elif key.startswith('ARCADE_LOGGING_'):
            # ARCADE_LOGGING_SESSION_ENABLED=true -> modules['session']['enabled'] = True
            parts = key[len('ARCADE_LOGGING_'):].lower().split('_')
            if len(parts) < 2:
                continue
            settings = _config['modules'].setdefault(parts[0], {})
            for part in parts[1:-1]:
                settings = settings.setdefault(part, {})
            settings[parts[-1]] = _parse_env_value(value)
        elif key.startswith('ARCADE_LOG_'):
            _config['module_levels'][key[len('ARCADE_LOG_'):].lower()] = _level_from_string(value)


_load_env_config()


def get_log_dir() -> str:
    """Directory FileSink writes to.

    ARCADE_LOG_DIR when set, otherwise $XDG_DATA_HOME/arcade/logs
    (~/.local/share/arcade/logs).
    """
    configured = _config['log_dir'] or os.environ.get('ARCADE_LOG_DIR')
    if configured:
        return str(Path(configured).expanduser())
    data_home = os.environ.get('XDG_DATA_HOME') or str(Path.home() / '.local' / 'share')
    return str(Path(data_home) / 'arcade' / 'logs')


def get_module_config(module: str) -> Dict[str, Any]:
    """Record sink settings for a module, {} if none were configured."""
    return _config['modules'].get(module.lower(), {})


# =============================================================================
# Structured records
# =============================================================================

class LogSink(ABC):
    """Destination for structured records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """
        Write one record.

        Args:
            module: Module the record belongs to (e.g. 'session')
            record: JSON-serializable dict
        """

    @abstractmethod
    def flush(self) -> None:
        """Push buffered records to their destination."""

    @abstractmethod
    def close(self) -> None:
        """Release the destination."""

    def __enter__(self) -> 'LogSink':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class FileSink(LogSink):
    """
    JSON Lines files, one per module: <log_dir>/<session_name>_<module>.jsonl

    The first line of each file is a header record and close() appends a
    footer record, so a reader can tell a finished file from a cut one.
    Record lines get a wall_time unless they carry one already.

    Args:
        log_dir: Output directory (default: get_log_dir(), resolved lazily)
        session_name: File name prefix (default: start timestamp)
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        session_name: Optional[str] = None,
    ):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, IO[str]] = {}

    def _path_for(self, module: str) -> Path:
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        return self._log_dir / f"{self._session_name}_{module}.jsonl"

    @staticmethod
    def _write(handle: IO[str], record: Dict[str, Any]) -> None:
        handle.write(json.dumps(record) + "\n")

    def _open(self, module: str) -> IO[str]:
        handle = self._files.get(module)
        if handle is None:
            path = self._path_for(module)
            path.parent.mkdir(parents=True, exist_ok=True)
            handle = open(path, 'a')
            self._write(handle, {
                'type': 'header',
                'module': module,
                'session_name': self._session_name,
                'start_time': time.time(),
            })
            self._files[module] = handle
        return handle

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        self._write(self._open(module), {'wall_time': time.time(), **record})

    def flush(self) -> None:
        for handle in self._files.values():
            handle.flush()

    def close(self) -> None:
        for module, handle in self._files.items():
            self._write(handle, {'type': 'footer', 'module': module, 'end_time': time.time()})
            handle.close()
        self._files.clear()


class NullSink(LogSink):
    """Accepts records and drops them."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """Route records for a module to a sink, replacing any previous one."""
    _sinks[module] = sink


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Send a record to the module's sink.

    Returns:
        False if no sink is registered for the module
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister every sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def create_sink_for_module(
    module: str,
    session_name: Optional[str] = None,
) -> LogSink:
    """
    Build the sink the environment asks for.

    ARCADE_LOGGING_<MODULE>_ENABLED=true gives a FileSink (in
    ARCADE_LOGGING_<MODULE>_DIR when set); anything else a NullSink.
    """
    settings = get_module_config(module)
    if not settings.get('enabled', False):
        return NullSink()
    return FileSink(log_dir=settings.get('dir'), session_name=session_name)


# =============================================================================
# Console logger
# =============================================================================

class GameLogger:
    """Console logger bound to one module name."""

    def __init__(self, module: str):
        self.module = module
        self._key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        """Effective level: the module override, else the default."""
        return _config['module_levels'].get(self._key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, label: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                # Mismatched arguments
                msg = f"{msg} {args}"
        print(f"[{self.module}] {label}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    warn = warning

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log at ERROR, followed by the traceback being handled."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)
        tb = traceback.format_exc().strip()
        if tb and tb != 'NoneType: None':
            for line in tb.splitlines():
                self._log(LogLevel.ERROR, 'TRACE', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> GameLogger:
    """
    Get the logger for a module.

    Cached: repeated calls with the same name return the same object.
    """
    return GameLogger(module)
