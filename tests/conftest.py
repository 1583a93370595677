import logging

import pytest


@pytest.fixture(autouse=True)
def reset_questlog_logger():
    # main() installs handlers bound to the streams of the test that called it
    yield
    logger = logging.getLogger("questlog")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
