from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

import pytest

from bomstrip.detector import UTF8_BOM
from bomstrip.logging import ROOT_LOGGER

_real_replace = os.replace


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers = []
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def bom_file(tmp_path: Path) -> Callable[..., Path]:
    def _factory(name: str = "sample.txt", body: bytes = b"hello\nworld\n", *, bom: bool = True) -> Path:
        path = tmp_path / name
        path.write_bytes((UTF8_BOM if bom else b"") + body)
        return path

    return _factory


@pytest.fixture
def fail_replace(monkeypatch: pytest.MonkeyPatch) -> Callable[[Callable[[str, str], bool]], list[tuple[str, str]]]:
    """Make ``os.replace`` raise for calls matching ``predicate(src, dst)``."""

    def _install(predicate: Callable[[str, str], bool]) -> list[tuple[str, str]]:
        calls: list[tuple[str, str]] = []

        def _replace(src, dst, *args, **kwargs):
            calls.append((str(src), str(dst)))
            if predicate(str(src), str(dst)):
                raise PermissionError(13, "Permission denied", str(dst))
            return _real_replace(src, dst, *args, **kwargs)

        monkeypatch.setattr(os, "replace", _replace)
        return calls

    return _install


def sibling_names(path: Path) -> set[str]:
    return {entry.name for entry in path.parent.iterdir()}
