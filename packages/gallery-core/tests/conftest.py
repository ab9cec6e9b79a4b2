"""Shared pytest fixtures for gallery-core tests.

This module provides common fixtures used across unit and integration tests.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest
import structlog


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    Ensures capsys can capture log events emitted by the library, regardless
    of test execution order.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def scenario_entries() -> list[dict[str, Any]]:
    """Return the two-image gallery: first captioned, second without caption.

    Returns:
        Raw records as a caller would pass them.
    """
    return [
        {"src": "/a.jpg", "caption": "Cap A", "width": 200, "height": 150},
        {"src": "/b.jpg", "width": 200, "height": 150},
    ]


@pytest.fixture
def mixed_caption_entries() -> list[dict[str, Any]]:
    """Return records covering present, empty, and absent captions.

    Returns:
        Raw records with caption "Sunset", "", and no caption key.
    """
    return [
        {
            "src": "https://cdn.example.com/sunset.jpg",
            "caption": "Sunset",
            "width": 640,
            "height": 480,
        },
        {"src": "/img/blank.png", "caption": "", "width": 320, "height": 240},
        {"src": "/img/plain.png", "width": 100, "height": 100},
    ]


@pytest.fixture
def tmp_gallery_yaml(tmp_path: Path, scenario_entries: list[dict[str, Any]]) -> Path:
    """Create a gallery.yaml holding the scenario entries.

    Args:
        tmp_path: pytest's temporary path fixture.
        scenario_entries: Raw records to write.

    Returns:
        Path to the gallery.yaml file.
    """
    import yaml

    gallery_yaml = tmp_path / "gallery.yaml"
    gallery_yaml.write_text(yaml.dump({"images": scenario_entries}, sort_keys=False))
    return gallery_yaml
