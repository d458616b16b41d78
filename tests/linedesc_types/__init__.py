"""Marshalling layer tests (linedesc.types)."""
