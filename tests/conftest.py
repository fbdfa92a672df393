"""Shared test fixtures for cxxtool."""

import logging
from pathlib import Path

import pytest

from cxxtool.context import Context, RunOptions

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def raw_config(tmp_path):
    return {"product": "foo", "version": "1.2.3", "source": str(tmp_path)}


@pytest.fixture
def make_context(raw_config):
    def _make(registry=None, **options):
        return Context(raw_config, RunOptions(**options), registry=registry)

    return _make


@pytest.fixture
def ctx(make_context):
    return make_context(generate=True, sanitize=True)


@pytest.fixture(autouse=True)
def reset_cxxtool_logger():
    yield
    logger = logging.getLogger("cxxtool")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
