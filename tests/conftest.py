"""Shared pytest fixtures for fieldrules tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from fieldrules.config.models import RulesConfig


@pytest.fixture
def legacy_config() -> RulesConfig:
    """Config reproducing colon-less ``required_with*`` tokens."""
    return RulesConfig(legacy_required_with=True)


@pytest.fixture
def _restore_logging() -> Generator[None]:
    """Restore root and ``fieldrules`` logger state after a test.

    Use via ``@pytest.mark.usefixtures("_restore_logging")`` on tests that
    call ``configure_logging``.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("fieldrules")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
