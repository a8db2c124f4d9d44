"""Pytest configuration and fixtures."""

import logging
import textwrap
from pathlib import Path

import pytest

from assertgen.config import GeneratorConfig
from assertgen.registry import DependencyRegistry


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up assertgen loggers after each test to prevent handler leaks."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("assertgen")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "assertgen.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


@pytest.fixture()
def config():
    return GeneratorConfig()


@pytest.fixture()
def registry():
    return DependencyRegistry()
