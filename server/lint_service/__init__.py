"""lintface HTTP service."""
