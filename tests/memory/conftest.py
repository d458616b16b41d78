"""
Memory safety test fixtures.

Provides tools for:
- Weak reference tracking of wrappers
- Native handle balance checks against the fake shim
"""

import gc
import weakref
from typing import Any

import pytest


@pytest.fixture
def ref_tracker():
    """Track wrapper survival through weak references."""

    class RefTracker:
        def __init__(self):
            self._weak_refs: list[weakref.ref] = []

        def track_weak(self, obj: Any) -> weakref.ref:
            """Track object weakly - should be GC'd."""
            ref = weakref.ref(obj)
            self._weak_refs.append(ref)
            return ref

        def assert_weak_collected(self):
            """Assert all weakly-tracked objects were GC'd."""
            gc.collect()
            gc.collect()
            alive = [r for r in self._weak_refs if r() is not None]
            assert not alive, f"{len(alive)} weak refs still alive"

        def clear(self):
            self._weak_refs.clear()

    tracker = RefTracker()
    yield tracker
    tracker.clear()


@pytest.fixture
def handle_counter(fake_lib):
    """Count native handles created and deleted during a block."""

    class HandleCounter:
        def __init__(self, lib):
            self._lib = lib
            self._live = set(lib.live())
            self._deleted = len(lib.deleted)

        @property
        def deleted(self) -> int:
            return len(self._lib.deleted) - self._deleted

        @property
        def balance(self) -> int:
            """Positive = leaks."""
            gc.collect()
            return len([h for h in self._lib.live() if h not in self._live])

        def assert_balanced(self, context: str = ""):
            ctx = f" in {context}" if context else ""
            assert self.balance == 0, f"Handle imbalance{ctx}: {self.balance} handles alive"

    return HandleCounter(fake_lib)
