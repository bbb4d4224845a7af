"""Root test configuration: isolated working directory, sample blog, and logger reset"""

import logging
import os
import shutil
from pathlib import Path

import pytest

from mdstore.logs import LOGGER_NAME


FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test in an empty cwd with no MDSTORE_* variables, so config.yaml/env cannot leak in."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("MDSTORE_"):
            monkeypatch.delenv(name)
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture(name="blog_dir")
def blog_dir_fixture(tmp_path):
    """A copy of the sample blog: one draft and one published post."""
    dest = tmp_path / "blog"
    shutil.copytree(FIXTURES / "blog", dest)
    return dest


@pytest.fixture(name="swifty_text")
def swifty_text_fixture():
    """Raw text of the sample draft."""
    path = FIXTURES / "blog" / "_drafts" / "2017-03-09-swifty-storyboards-sans-string-literals.md"
    return path.read_text(encoding="utf-8")
