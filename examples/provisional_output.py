#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DropGuard Demo Script - Provisional Output Files

Creates an output file, "fails" before writing anything, and shows that no
empty file is left behind. Then repeats the export successfully.

Usage:
    python examples/provisional_output.py              # Demo in a temp directory
    python examples/provisional_output.py --dir out/   # Demo in a chosen directory
"""

import argparse
import sys
import tempfile
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import dropguard
from dropguard import guarded_open, AlreadyExistsError


def export(path: Path, rows, fail_early: bool = False) -> None:
    """Write rows to a brand new file; an early failure leaves nothing behind."""
    with guarded_open(path, create=True) as f:
        if fail_early:
            raise RuntimeError("upstream data unavailable")
        for row in rows:
            f.write(",".join(str(v) for v in row).encode() + b"\n")


def run_demo(directory: Path) -> None:
    target = directory / "export.csv"
    rows = [("id", "value"), (1, 3.5), (2, 4.25)]

    print(f"1) Export that fails before writing -> {target.name}")
    try:
        export(target, rows, fail_early=True)
    except RuntimeError as e:
        print(f"   failed: {e}")
    print(f"   file exists afterwards: {target.exists()}")

    print("2) Export that succeeds")
    export(target, rows)
    print(f"   file exists afterwards: {target.exists()} ({target.stat().st_size} bytes)")

    print("3) Exclusive create refuses to clobber it")
    try:
        export(target, rows)
    except AlreadyExistsError as e:
        print(f"   refused: {e}")

    print("4) Explicit delete")
    guarded_open(target).delete()
    print(f"   file exists afterwards: {target.exists()}")

    stats = dropguard.get_performance_stats()
    print(f"\nCounters: {stats}")


def main():
    parser = argparse.ArgumentParser(description="DropGuard provisional output demo")
    parser.add_argument('--dir', type=Path, default=None,
                        help='Directory to run the demo in (temp dir by default)')
    args = parser.parse_args()

    if args.dir is not None:
        args.dir.mkdir(parents=True, exist_ok=True)
        run_demo(args.dir)
        return

    with tempfile.TemporaryDirectory() as tmp:
        run_demo(Path(tmp))


if __name__ == "__main__":
    main()
