"""Pytest configuration and common fixtures for gameprefs tests."""

import os
import sys
import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(scope="function")
def base_dir(tmp_path):
    """Provide an empty install folder."""
    return str(tmp_path / "client")


@pytest.fixture(scope="function")
def store(base_dir):
    """Provide an initialized store backed by a fresh config.ini."""
    from gameprefs.store import ProfileConfigStore

    store = ProfileConfigStore(base_dir).init()
    yield store
    store.teardown()


@pytest.fixture(scope="function")
def config_path(store):
    return store.config_path


def pytest_configure(config):
    """Configure pytest for gameprefs testing."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add default markers."""
    for item in items:
        # Mark tests based on their location
        if "test_cli_entrypoints.py" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "test_store.py" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
