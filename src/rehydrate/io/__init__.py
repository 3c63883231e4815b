"""Shared file I/O helpers."""

from .files import atomic_replace, copy_file_atomic, file_sha256

__all__ = ["atomic_replace", "copy_file_atomic", "file_sha256"]
