import sys
from pathlib import Path

import pytest
from loguru import logger

_THIS_DIR = Path(__file__).resolve().parent
_REPO_ROOT = _THIS_DIR.parent

if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from drrs_toggle import logger as app_logger  # noqa: E402


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    app_logger.configure()
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
