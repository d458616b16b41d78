"""
Exception hierarchy tests.

Native error codes are ``cv::Error::Code`` values. Codes without a
dedicated class map to ``NativeError``.
"""
