"""Shared fixtures for the hostie test suite."""

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_hostie_logger() -> Iterator[None]:
    """Drop handlers bound to streams captured by a previous test."""
    yield
    logger = logging.getLogger("hostie")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def hosts_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[[str], Path]:
    """Return a writer that creates a hosts file and points HOSTIE_HOSTS_FILE at it."""

    def _write(content: str) -> Path:
        path = tmp_path / "hosts"
        path.write_text(content, encoding="utf-8")
        monkeypatch.setenv("HOSTIE_HOSTS_FILE", str(path))
        return path

    return _write
