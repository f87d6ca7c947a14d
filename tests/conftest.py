"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

SAMPLE_CONFIG: dict[str, Any] = {
    "hostname": "example.com",
    "port": 8080,
    "database": "db.sqlite",
    "cookie-secret": "s3cr3t",
    "auth": {"google": {"key": "k1", "secret": "s1"}},
}


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a config file and return its path.

    Strings and bytes are written verbatim; anything else is JSON-encoded.
    """

    def _write(content: Any, name: str = "config.json") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        elif isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config_path(write_config: Callable[..., Path]) -> Path:
    return write_config(SAMPLE_CONFIG)
