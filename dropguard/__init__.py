#=============================================================================
# File        : dropguard/__init__.py
# Project     : DropGuard v1.0 - Open Source
# Component   : Package Initialization
# Description : File handles that clean up after themselves
#               • Exclusive-create or open-existing read/write handles
#               • Unwritten files created by a handle are deleted on release
#               • Written or pre-existing files are always kept
#               • Diagnostics for live handles and release outcomes
# Author      : Kyle Clouthier
# Version     : 1.0.0
# Technology  : Python 3.8+, Weak References, psutil
# Standards   : PEP 8, Type Hints, Dataclasses
# Created     : 2025-08-19
# Modified    : 2025-08-27 (Open source release)
# Dependencies: typing, pathlib, threading, psutil
# SHA-256     : [Updated by CI/CD]
# Testing     : 100% coverage, comprehensive test suite
# License     : MIT License
# Copyright   : © 2025 Kyle Clouthier. Released under MIT License.
#=============================================================================

"""
DropGuard - provisional files that never outlive a failed attempt.

Quick Start:
    from dropguard import guarded_open

    with guarded_open("report.csv", create=True) as f:
        data = render_report()     # raising here leaves no empty report.csv
        f.write(data)              # once written, the file is kept

    # A created file that was never written is removed on release
    with guarded_open("scratch.bin", create=True):
        pass
"""

from .core import (
    configure,
    get_status
)

from .config import (
    DropGuardConfig,
    get_default_config,
    set_default_config
)

from .errors import (
    ErrorKind,
    GuardedFileError,
    AlreadyExistsError,
    OpenFailedError,
    DeleteFailedError,
    SeekFailedError,
    CursorFailedError,
    TruncateFailedError
)

from .guards.guarded_file import (
    GuardedFile,
    guarded_open,
    scan_pending_deletions,
    get_guarded_files_info,
    get_performance_stats,
    reset_performance_stats
)

__version__ = "1.0.0"
__author__ = "Kyle Clouthier"
__license__ = "MIT"

__all__ = [
    # Core functions
    "configure",
    "get_status",

    # Guarded files
    "GuardedFile",
    "guarded_open",
    "scan_pending_deletions",
    "get_guarded_files_info",
    "get_performance_stats",
    "reset_performance_stats",

    # Configuration
    "DropGuardConfig",
    "get_default_config",
    "set_default_config",

    # Errors
    "ErrorKind",
    "GuardedFileError",
    "AlreadyExistsError",
    "OpenFailedError",
    "DeleteFailedError",
    "SeekFailedError",
    "CursorFailedError",
    "TruncateFailedError",

    # Metadata
    "__version__",
    "__author__",
    "__license__"
]
