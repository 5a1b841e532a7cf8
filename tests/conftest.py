import sys

import pytest
from loguru import logger

from motdtext.service import TextFormatService


@pytest.fixture
def service():
    return TextFormatService()


@pytest.fixture(autouse=True)
def _restore_logger():
    # The CLI swaps loguru sinks; put the default one back after each test.
    yield
    logger.remove()
    logger.add(sys.stderr)
