#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import pytest

from recjson import Config, Registry


@pytest.fixture(autouse=True)
def config(tmp_path):
    """Isolate every test from the process environment and props file."""
    cfg = Config(environ={}, props_path=str(tmp_path / "config.props"))
    Config.reset(cfg)
    yield cfg
    Config.reset()


@pytest.fixture
def registry():
    return Registry.make()
