"""
Memory safety tests for the FFI boundary.

Tests native ownership and lifecycle:
- Handle release on close, context exit and garbage collection
- Temporaries created for omitted arguments
- Error path cleanup (leak-on-failure prevention)
- Stress tests (slow leak detection)
"""
