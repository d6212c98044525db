"""Shared fixtures.

Block and emoji data come from the trimmed copies of Blocks.txt and
emoji-test.txt in tests/data; codepoints come from unicodedata as usual.
"""

import shutil
from pathlib import Path

import pytest

from unilookup.config import Config
from unilookup.unidata import UnicodeRepository

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(scope="session")
def data_dir(tmp_path_factory):
    """Create a data directory holding the test data files."""
    path = tmp_path_factory.mktemp("unidata")
    for name in ("Blocks.txt", "emoji-test.txt"):
        shutil.copy(DATA_DIR / name, path / name)
    return path


@pytest.fixture(scope="session")
def offline_config(data_dir):
    """Create an offline configuration pointing at the test data."""
    config = Config()
    config.data_directory = data_dir
    config.offline = True
    return config


@pytest.fixture(scope="session")
def repo(offline_config):
    """Create a repository over the test data.

    Session scoped: building the codepoint table walks every codepoint.
    """
    return UnicodeRepository(offline_config)


@pytest.fixture
def cli_env(data_dir):
    """Environment for running the CLI against the test data."""
    return {"UNILOOKUP_DATA_DIR": str(data_dir), "UNILOOKUP_OFFLINE": "1"}
