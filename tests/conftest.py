"""Shared pytest fixtures and test helpers for ooplab tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from ooplab.config.settings import OoplabSettings
from ooplab.domain.shapes import SHAPE_REGISTRY
from ooplab.infrastructure.lab import Lab
from ooplab.infrastructure.outbox import Outbox


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's OOPLAB_* environment out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("OOPLAB_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_shape_registry() -> Generator[None]:
    """Undo shape registrations made by plugins or tests."""
    snapshot = dict(SHAPE_REGISTRY)
    yield
    SHAPE_REGISTRY.clear()
    SHAPE_REGISTRY.update(snapshot)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> OoplabSettings:
    """Default settings with no ooplab.toml in reach."""
    return OoplabSettings.from_cli(start=tmp_path)


@pytest.fixture
def outbox() -> Outbox:
    return Outbox()


@pytest.fixture
def lab(settings: OoplabSettings) -> Lab:
    """Lab on default settings with a fresh outbox."""
    return Lab(settings)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from a temp directory so no stray ooplab.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.  Tests that write an ``ooplab.toml`` request ``tmp_path`` too
    (pytest deduplicates, it is the same directory).
    """
    monkeypatch.chdir(tmp_path)
