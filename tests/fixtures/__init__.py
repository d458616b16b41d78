"""
Test fixtures for linedesc.

- ``fake_lib``: in-process stand-in for the native shim (``FakeLib``)
"""

from .fake_lib import CV_8UC1, CV_8UC3, CV_32FC1, FakeCvError, FakeLib

__all__ = ["FakeLib", "FakeCvError", "CV_8UC1", "CV_8UC3", "CV_32FC1"]
