"""Shared pytest fixtures for aseprite-sheet tests.

This module provides common fixtures used across unit, integration,
and contract tests.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import pytest
import structlog

_SINGLE_FRAME_DOCUMENT: dict[str, Any] = {
    "frames": [
        {
            "filename": "a.png",
            "frame": {"x": 0, "y": 0, "w": 16, "h": 16},
            "rotated": False,
            "trimmed": False,
            "spriteSourceSize": {"x": 0, "y": 0, "w": 16, "h": 16},
            "sourceSize": {"w": 16, "h": 16},
            "duration": 100,
        }
    ],
    "meta": {
        "app": "aseprite",
        "version": "1.2",
        "image": "a.png",
        "format": "RGBA8888",
        "size": {"w": 16, "h": 16},
        "scale": "1",
    },
}


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    This fixture ensures structlog outputs to stdout so that capsys
    can capture the output in tests. Without this, structlog may use
    different processors depending on test execution order.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),  # resolves sys.stdout per logger
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def single_frame_document() -> dict[str, Any]:
    """Return a minimal one-frame export in the array layout.

    No frameTags, layers or slices sections are present.

    Returns:
        Dictionary representing the export document (safe to mutate).
    """
    return copy.deepcopy(_SINGLE_FRAME_DOCUMENT)


@pytest.fixture
def hash_document(single_frame_document: dict[str, Any]) -> dict[str, Any]:
    """Return the one-frame export rewritten in the hash layout.

    Entries are keyed by name and carry no filename, as Aseprite writes them.

    Returns:
        Dictionary representing the export document (safe to mutate).
    """
    document = copy.deepcopy(single_frame_document)
    frame = document["frames"][0]
    name = frame.pop("filename")
    document["frames"] = {name: frame}
    return document


@pytest.fixture
def sample_frame_tags() -> list[dict[str, Any]]:
    """Return frameTags entries covering every direction.

    Returns:
        List of frame tag dictionaries.
    """
    return [
        {"name": "walk", "from": 0, "to": 3, "direction": "forward"},
        {"name": "fall", "from": 4, "to": 5, "direction": "reverse"},
        {"name": "bounce", "from": 6, "to": 8, "direction": "pingpong"},
    ]


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory.

    Returns:
        Path to the fixtures directory.
    """
    return Path(__file__).parent / "fixtures"
