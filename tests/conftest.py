import logging

import pytest


@pytest.hookimpl(tryfirst=True)
def pytest_runtest_call(item):
    """Give `bare_root` tests a root logger without pytest's capture handlers.

    pytest's logging plugin attaches its handlers to the root logger at the
    start of the call phase, after fixtures have run, so the `bare_root`
    fixture cannot remove them itself.
    """
    if "bare_root" in getattr(item, "fixturenames", ()):
        logging.getLogger().handlers = []
