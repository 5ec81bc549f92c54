"""Test configuration ensuring the project package is importable."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import esprima
import pytest

ROOT = Path(__file__).resolve().parent.parent

root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from jsunmangle.name_pool import NamePool  # noqa: E402


@pytest.fixture()
def parse() -> Callable[[str], object]:
    return esprima.parseScript


@pytest.fixture()
def parse_module() -> Callable[[str], object]:
    return esprima.parseModule


@pytest.fixture()
def pool() -> NamePool:
    return NamePool(seed=1234)
