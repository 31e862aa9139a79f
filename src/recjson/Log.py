#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

#
# Log - logging support for recjson
#
import logging
from datetime import datetime, timezone


class LogLevel:
    """
    LogLevel represents the severity of a log message.
    """

    _levels = {}

    def __init__(self, name, ordinal, py_level):
        self._name = name
        self._ordinal = ordinal
        self._py_level = py_level

    @staticmethod
    def fromStr(name, checked=True):
        """Parse LogLevel from string"""
        name_lower = name.strip().lower()
        if name_lower in LogLevel._levels:
            return LogLevel._levels[name_lower]
        if checked:
            from .Err import ArgErr
            raise ArgErr(f"Unknown log level: {name}")
        return None

    @staticmethod
    def vals():
        return [LogLevel.debug, LogLevel.info, LogLevel.warn, LogLevel.err, LogLevel.silent]

    def name(self):
        return self._name

    def ordinal(self):
        return self._ordinal

    def pyLevel(self):
        """Equivalent stdlib logging level."""
        return self._py_level

    def toStr(self):
        return self._name

    def __lt__(self, other):
        return self._ordinal < other._ordinal

    def __le__(self, other):
        return self._ordinal <= other._ordinal

    def __eq__(self, other):
        if not isinstance(other, LogLevel):
            return False
        return self._ordinal == other._ordinal

    def __hash__(self):
        return hash(self._ordinal)

    def __repr__(self):
        return f"LogLevel({self._name})"


LogLevel.debug = LogLevel("debug", 0, logging.DEBUG)
LogLevel.info = LogLevel("info", 1, logging.INFO)
LogLevel.warn = LogLevel("warn", 2, logging.WARNING)
LogLevel.err = LogLevel("err", 3, logging.ERROR)
LogLevel.silent = LogLevel("silent", 4, logging.CRITICAL + 10)

for _level in LogLevel.vals():
    LogLevel._levels[_level.name()] = _level


class LogRec:
    """
    LogRec represents a single log record.
    """

    def __init__(self, time, level, logName, msg, err=None):
        self._time = time
        self._level = level
        self._logName = logName
        self._msg = msg
        self._err = err

    def time(self):
        return self._time

    def level(self):
        return self._level

    def logName(self):
        return self._logName

    def msg(self):
        return self._msg

    def err(self):
        return self._err

    def toStr(self):
        return f"[{self._level.name()}] {self._logName}: {self._msg}"


class Log:
    """
    Log provides named loggers backed by the stdlib logging module.
    """

    _logs = {}
    _handlers = []  # Global handlers receiving every LogRec

    def __init__(self, name, register=True):
        """Create a new log. If register=True, adds to global registry."""
        if not Log._isValidName(name):
            from .Err import ArgErr
            raise ArgErr(f"Invalid log name: {name}")

        if register and name in Log._logs:
            from .Err import ArgErr
            raise ArgErr(f"Log already registered: {name}")

        self._name = name
        self._level = Log._configuredLevel()
        self._pyLogger = logging.getLogger(name)

        if register:
            Log._logs[name] = self

    @staticmethod
    def _isValidName(name):
        """Validate log name - must be valid identifier characters"""
        if not name:
            return False
        for c in name:
            if not (c.isalnum() or c == '.' or c == '_'):
                return False
        return True

    @staticmethod
    def _configuredLevel():
        from .Config import Config
        return LogLevel.fromStr(Config.cur().get("log.level", "info"))

    @staticmethod
    def get(name):
        """Get or create a log by name"""
        if name in Log._logs:
            return Log._logs[name]
        return Log(name, True)

    @staticmethod
    def find(name, checked=True):
        """Find a log by name"""
        if name in Log._logs:
            return Log._logs[name]
        if checked:
            from .Err import ArgErr
            raise ArgErr(f"Unknown log: {name}")
        return None

    def name(self):
        return self._name

    def level(self, value=None):
        """Get or set log level - called as log.level() or log.level(newLevel)"""
        if value is None:
            return self._level
        self._level = value
        return None

    def isEnabled(self, level):
        return level._ordinal >= self._level._ordinal

    def isDebug(self):
        return self.isEnabled(LogLevel.debug)

    def debug(self, msg, err=None):
        if self.isEnabled(LogLevel.debug):
            self._log(LogLevel.debug, msg, err)

    def info(self, msg, err=None):
        if self.isEnabled(LogLevel.info):
            self._log(LogLevel.info, msg, err)

    def warn(self, msg, err=None):
        if self.isEnabled(LogLevel.warn):
            self._log(LogLevel.warn, msg, err)

    def err(self, msg, err=None):
        if self.isEnabled(LogLevel.err):
            self._log(LogLevel.err, msg, err)

    def _log(self, level, msg, err):
        rec = LogRec(datetime.now(timezone.utc), level, self._name, msg, err)
        self.log(rec)

    def log(self, rec):
        """Log a record - can be overridden by subclasses"""
        for handler in Log._handlers:
            handler(rec)

        self._pyLogger.log(rec.level().pyLevel(), rec.msg(), exc_info=rec.err())

    def toStr(self):
        return self._name

    @staticmethod
    def handlers():
        """Get global log handlers"""
        return list(Log._handlers)

    @staticmethod
    def addHandler(handler):
        """Add a global log handler"""
        if not callable(handler):
            from .Err import ArgErr
            raise ArgErr("Handler must be callable")
        Log._handlers.append(handler)

    @staticmethod
    def removeHandler(handler):
        """Remove a global log handler"""
        if handler in Log._handlers:
            Log._handlers.remove(handler)
