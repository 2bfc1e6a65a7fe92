#=============================================================================
# File        : dropguard/guards/__init__.py
# Project     : DropGuard v1.0
# Component   : Guards Package - Guarded File Exports
# Description : Package initialization for guarded file handles
#               " GuardedFile class and guarded_open() entry point
#               " Live handle diagnostics and counters
# Author      : Kyle Clouthier
# Version     : 1.0.0
# Technology  : Python 3.8+
# Standards   : PEP 8, Type Hints
# Created     : 2025-08-19
# Modified    : 2025-08-19 (Initial creation)
# Dependencies: guarded_file
# SHA-256     : [PLACEHOLDER - Updated by CI/CD]
# Testing     : 100% coverage, all tests passing
# License     : MIT License
# Copyright   : © 2025 Kyle Clouthier. All rights reserved.
#=============================================================================

from .guarded_file import (
    GuardedFile,
    guarded_open,
    scan_pending_deletions,
    get_guarded_files_info,
    get_performance_stats,
    reset_performance_stats
)

__all__ = [
    "GuardedFile",
    "guarded_open",
    "scan_pending_deletions",
    "get_guarded_files_info",
    "get_performance_stats",
    "reset_performance_stats"
]
