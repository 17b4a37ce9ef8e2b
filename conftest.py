# conftest.py — root-level pytest configuration
import sys
import os

import pytest

# Ensure the project root is on sys.path so that
# ``import mcdm`` etc. work without editable install.
sys.path.insert(0, os.path.dirname(__file__))

collect_ignore_glob = ["__init__.py"]


@pytest.fixture(autouse=True)
def _fresh_global_config():
    """Each test starts from the default global configuration."""
    from config import reset_config
    reset_config()
    yield
    reset_config()
