"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import os
import typing as typ
from unittest import mock

import pytest

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@pytest.fixture(autouse=True)
def _isolate_gitcoins_env() -> cabc.Iterator[None]:
    """Keep host GITCOINS_* variables from leaking into tests."""
    clean = {k: v for k, v in os.environ.items() if not k.startswith("GITCOINS_")}
    with mock.patch.dict(os.environ, clean, clear=True):
        yield
