"""Enums for file operations."""

from enum import Enum


class CopyStrategy(Enum):
    """Available file copy strategies."""

    BYTE = "byte"
    BLOCK = "block"
    LINE = "line"
