"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(autouse=True)
def setup_logging():
    """Route loguru to stderr at DEBUG for the duration of each test."""
    from loguru import logger

    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG",
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )

    yield

    logger.remove()


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def echo_renderer():
    """Renderer that wraps markdown in a <div> so tests can see it ran."""
    return lambda text: f"<div>{text}</div>"


@pytest.fixture
def sample_quiz_text():
    """A two-question quiz in the content pack format."""
    return (
        "# Math Quiz\n"
        "\n"
        "### Q1\n"
        "What is 2+2?\n"
        "a) 3\n"
        "b) 4\n"
        "c) 5\n"
        "\n"
        "**Answer: b)**\n"
        "\n"
        "### Q2\n"
        "Which number is prime?\n"
        "\n"
        "a) 4\n"
        "b) 6\n"
        "c) 7\n"
        "\n"
        "**Answer: c)**\n"
    )


@pytest.fixture
def sample_lesson_text():
    """A markdown lesson with a level-1 heading."""
    return "# Introduction to Sets\n\nA set is a collection of distinct objects.\n"
