"""Fixtures for end-to-end CLI tests."""

import logging

import pytest
from click.testing import CliRunner

from checkedops.config import INT_BITS_ENV_VAR
from checkedops.logging import PROJECT_PREFIX

# pylint: disable=redefined-outer-name


@pytest.fixture(autouse=True)
def reset_project_logger_levels():
    """Undo -L overrides so one invocation's logger levels don't leak into the next."""
    yield
    for name in list(logging.root.manager.loggerDict):
        if name.startswith(PROJECT_PREFIX):
            logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def runner(monkeypatch):
    """Return a Click CliRunner with no CHECKEDOPS settings in the environment."""
    monkeypatch.delenv(INT_BITS_ENV_VAR, raising=False)
    monkeypatch.delenv("CHECKEDOPS_LOGGER_LEVEL", raising=False)
    return CliRunner()
