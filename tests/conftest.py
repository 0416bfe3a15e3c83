import logging

import pytest

from plagiarism_engine.core.config import EngineConfig


def make_words(prefix: str, count: int, start: int = 0) -> str:
    """Space separated distinct tokens such as ``ref0 ref1 ref2``."""
    return " ".join(f"{prefix}{i}" for i in range(start, start + count))


@pytest.fixture
def words():
    return make_words


@pytest.fixture
def config():
    return EngineConfig()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
