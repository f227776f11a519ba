"""Pytest configuration and shared fixtures."""

from collections.abc import Generator

import pytest
import structlog

from subpack.utils.config import get_settings


@pytest.fixture(autouse=True)
def reset_settings() -> Generator[None, None, None]:
    """Clear settings cache and logging config around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def sample_srt_content() -> str:
    """Return sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:04,000
Hello, this is a test.

2
00:00:05,000 --> 00:00:08,000
<i>This is the second</i>
subtitle.

3
00:00:09,000 --> 00:00:12,000
[THUNDER]
"""


@pytest.fixture
def second_language_srt_content() -> str:
    """Return SRT content in another language, timed against the sample."""
    return """1
00:00:01,000 --> 00:00:04,000
Bonjour, ceci est un test.

2
00:00:05,500 --> 00:00:08,000
Ceci est le deuxième sous-titre.
"""
