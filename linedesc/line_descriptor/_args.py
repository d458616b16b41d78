"""Optional-argument helper shared by the line descriptor bindings."""

from contextlib import ExitStack
from typing import Callable, TypeVar

from ..types import Boxed

B = TypeVar("B", bound=Boxed)


def or_default(stack: ExitStack, value: B | None, factory: Callable[[], B]) -> B:
    """Return ``value``, or a temporary from ``factory`` released when ``stack`` exits."""
    if value is not None:
        return value
    return stack.enter_context(factory())
