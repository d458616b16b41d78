"""Core collaborator tests (Mat, FileStorage, vectors)."""
