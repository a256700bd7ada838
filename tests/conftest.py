# -*- coding: utf-8 -*-
"""Pytest configuration and shared fixtures."""

import importlib

import pytest
from rich.console import Console
from typer.testing import CliRunner

from metricconv.config import reset_config
from metricconv.converter import UnitConverter
from metricconv.engine import ConversionEngine
from metricconv.unit_resolver import UnitResolver

CONFIG_ENV_VARS = (
    "METRICCONV_QUIT_TOKEN",
    "METRICCONV_PROMPT",
    "METRICCONV_SHOW_INSTRUCTIONS",
    "METRICCONV_LOG_LEVEL",
)

# The package attribute metricconv.cli.main is the entry-point function.
cli_main = importlib.import_module("metricconv.cli.main")


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test from default configuration."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def resolver():
    return UnitResolver()


@pytest.fixture
def converter(resolver):
    return UnitConverter(resolver)


@pytest.fixture
def engine(converter):
    return ConversionEngine(converter)


@pytest.fixture
def runner(monkeypatch):
    """CLI runner with a plain, wide console so output is easy to match."""
    monkeypatch.setattr(cli_main, "console", Console(color_system=None, width=200))
    return CliRunner()
