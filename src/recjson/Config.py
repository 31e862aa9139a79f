#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""
Config resolves runtime settings from the environment and an optional
``etc/recjson/config.props`` file.
"""

import os


class Config:
    """Layered configuration lookup.

    Lookup order for a key such as ``writer.indent``:
    1. environment variable ``RECJSON_WRITER_INDENT``
    2. ``etc/recjson/config.props`` under the working directory, or the
       file named by ``RECJSON_CONFIG``
    3. the caller supplied default
    """

    ENV_PREFIX = "RECJSON_"
    PROPS_PATH = os.path.join("etc", "recjson", "config.props")

    _instance = None

    def __init__(self, environ=None, props_path=None):
        self._environ = environ if environ is not None else os.environ
        if props_path is None:
            props_path = self._environ.get(
                Config.ENV_PREFIX + "CONFIG",
                os.path.join(os.getcwd(), Config.PROPS_PATH))
        self._props_path = props_path
        self._props = None

    @staticmethod
    def cur():
        """Get the process-wide configuration."""
        if Config._instance is None:
            Config._instance = Config()
        return Config._instance

    @staticmethod
    def reset(config=None):
        """Replace the process-wide configuration (used by tests)."""
        Config._instance = config

    def propsPath(self):
        return self._props_path

    def props(self):
        """Get the parsed props file as a dict, empty if the file is missing."""
        if self._props is None:
            if os.path.isfile(self._props_path):
                with open(self._props_path, encoding="utf-8") as f:
                    self._props = Config.parseProps(f.read())
            else:
                self._props = {}
        return self._props

    def get(self, key, defVal=None):
        """Get configuration value.

        Args:
            key: Dotted config key
            defVal: Default value if not found

        Returns:
            Config value as a string, or defVal
        """
        env_key = Config.ENV_PREFIX + key.replace(".", "_").upper()
        val = self._environ.get(env_key)
        if val is not None:
            return val

        val = self.props().get(key)
        if val is not None:
            return val

        return defVal

    def getInt(self, key, defVal=None):
        val = self.get(key)
        if val is None or val == "":
            return defVal
        try:
            return int(val)
        except ValueError:
            from .Err import ArgErr
            raise ArgErr.make(f"Invalid int for config '{key}': {val}")

    def getBool(self, key, defVal=False):
        val = self.get(key)
        if val is None:
            return defVal
        lower = val.strip().lower()
        if lower in ("true", "yes", "on", "1"):
            return True
        if lower in ("false", "no", "off", "0"):
            return False
        from .Err import ArgErr
        raise ArgErr.make(f"Invalid bool for config '{key}': {val}")

    @staticmethod
    def parseProps(content):
        """Parse props format: ``name=value`` lines, ``#`` and ``//`` comments."""
        result = {}
        for line_num, line in enumerate(content.splitlines(), 1):
            line = line.strip()
            if not line or line.startswith('#') or line.startswith('//'):
                continue

            eq_pos = line.find('=')
            if eq_pos <= 0:
                from .Err import IOErr
                raise IOErr.make(f"Invalid name/value pair [Line {line_num}]")
            key = line[:eq_pos].strip()
            value = line[eq_pos + 1:].strip()
            result[key] = value
        return result
