"""
Global pytest fixtures for linedesc tests.

This module provides:
- Fault handling for native crashes
- The ``linedesc`` module fixture
- Logging isolation between tests
- Handle leak assertions against the fake native shim

=============================================================================
Native library policy
=============================================================================

Unit tests never load the real OpenCV shim. They install the in-process
``FakeLib`` (``tests/fixtures/fake_lib.py``) through the ``fake_lib``
fixture, which goes through the same ``set_lib()``/``setup_signatures()``
path as a real ``ctypes.CDLL``. The fake returns real ``Result`` structs and
real native string buffers, so marshalling and cleanup code run unchanged.

Tests that need the real library are marked ``requires_native`` and are
skipped unless ``LINEDESC_LIB_PATH`` points at a loadable shim.
"""

import faulthandler
import gc
import logging
import os

import pytest

# Enable faulthandler to trace native crashes (segfaults)
faulthandler.enable()


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "requires_native: test needs the real ocvrs_line_descriptor library"
    )
    config.addinivalue_line("markers", "slow: high-volume stress tests")


def pytest_collection_modifyitems(config, items):
    if os.environ.get("LINEDESC_LIB_PATH"):
        return
    skip_native = pytest.mark.skip(reason="LINEDESC_LIB_PATH not set")
    for item in items:
        if "requires_native" in item.keywords:
            item.add_marker(skip_native)


# =============================================================================
# Module fixtures
# =============================================================================


@pytest.fixture
def linedesc():
    """The imported linedesc package."""
    import linedesc as module

    return module


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _restore_linedesc_logger():
    """Undo handler/level changes made by setup_logging() inside a test."""
    logger = logging.getLogger("linedesc")
    handlers = logger.handlers[:]
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def no_leaks(fake_lib):
    """Assert every native handle created during the test was released."""
    before = set(fake_lib.live())
    yield fake_lib
    gc.collect()
    leaked = [h for h in fake_lib.live() if h not in before]
    kinds = sorted(fake_lib._handles[h][0] for h in leaked)
    assert not leaked, f"{len(leaked)} native handles leaked: {kinds}"
    assert fake_lib.pending_strings == 0, "native strings were not released"
