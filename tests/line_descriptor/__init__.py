"""line_descriptor binding tests against the fake native shim."""
