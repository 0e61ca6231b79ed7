"""
Pytest configuration and fixtures for pattern-trace tests.

This file contains shared fixtures and configuration for all test modules.
"""

import sys
import tempfile
from pathlib import Path

import matplotlib
import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Plots are only ever saved during tests, never shown
matplotlib.use("Agg")

CLASSIC_TEXT = "ABABDABACDABABCABAB"
CLASSIC_PATTERN = "ABABCABAB"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for a single test."""
    temp_dir = tempfile.mkdtemp(prefix="pattern_trace_test_")
    yield Path(temp_dir)

    # Cleanup
    import shutil

    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def classic_pair():
    """The textbook KMP example: a single occurrence at offset 10."""
    return CLASSIC_TEXT, CLASSIC_PATTERN


@pytest.fixture
def edge_case_pairs():
    """Hand-picked (text, pattern) pairs that exercise table and shift corner cases."""
    return [
        ("", "A"),
        ("A", "A"),
        ("A", "B"),
        ("AB", "ABC"),
        ("AAAAAA", "AA"),
        ("AAAAAA", "AAAAAA"),
        ("ABABABAB", "ABAB"),
        ("ABCABCABD", "ABCABD"),
        ("GCATCGCAGAGAGTATACAGTACG", "GCAGAGAG"),
        ("ababcabcabababd", "ababd"),
        ("aaaaabaaaaab", "aab"),
        ("xyzxyzxyz", "zx"),
        ("hello world", "o w"),
        ("mississippi", "issi"),
        ("mississippi", "ssippi"),
        ("abracadabra", "abra"),
        ("ABAAABCD", "ABC"),
        ("baaabab", "abab"),
    ]


@pytest.fixture
def corpus_generator():
    """Seeded mimesis-backed generator for reproducible random inputs."""
    from corpus.generate import CorpusGenerator

    return CorpusGenerator(seed=1234)


# Configure pytest markers
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


# Custom collection modifiers
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Mark integration tests
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        # Mark slow tests (tests that might take longer)
        if any(keyword in item.nodeid for keyword in ["large", "stress"]):
            item.add_marker(pytest.mark.slow)

        # Mark unit tests (default for most tests)
        if not any(
            marker.name in ["integration", "slow"] for marker in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# Pytest options
def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow", action="store_true", default=False, help="run slow tests"
    )


def pytest_runtest_setup(item):
    """Setup for individual test runs."""
    # Skip slow tests unless --run-slow is passed
    if "slow" in item.keywords and not item.config.getoption("--run-slow"):
        pytest.skip("need --run-slow option to run")
