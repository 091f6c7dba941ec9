#!/usr/bin/env python3
"""Basic usage example for Folder Mirror.

This example demonstrates:
1. Configuring a mirror between two directories
2. Running a first pass into an empty replica
3. Re-running with no changes (nothing happens)
4. Modifying, adding and deleting source files
5. Checking sync status without changing anything
6. Driving passes with PeriodicSync instead of calling the engine directly

Run this example:
    python examples/basic_usage.py
"""

import tempfile
import threading
from pathlib import Path

from folder_mirror import MirrorConfig, MirrorEngine, PeriodicSync
from folder_mirror.utils.logging import close_sync_logger


def main():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)

        source = temp_path / "source"
        replica = temp_path / "replica"
        log_file = temp_path / "mirror.log"
        source.mkdir()
        replica.mkdir()

        (source / "notes.txt").write_text("first draft")
        (source / "docs").mkdir()
        (source / "docs" / "readme.md").write_text("# Readme")

        print("=" * 60)
        print("Folder Mirror - Basic Usage Example")
        print("=" * 60)

        # ---------------------------------------------------------------------
        # Step 1: Configure
        # ---------------------------------------------------------------------
        print("\n[1] Configuring mirror...")

        config = MirrorConfig(
            source_path=source,          # Authoritative
            replica_path=replica,        # Kept identical
            log_file=log_file,           # Append-only action log
            interval_seconds=0.5,        # Only used by PeriodicSync
            echo_to_console=True,        # Print each log line as written
        )
        engine = MirrorEngine(config)

        # ---------------------------------------------------------------------
        # Step 2: First pass
        # ---------------------------------------------------------------------
        print("\n[2] First pass into an empty replica...")
        stats = engine.run_pass()
        print(f"    Copied {stats.files_copied} files ({stats.bytes_copied} bytes)")

        # ---------------------------------------------------------------------
        # Step 3: Nothing changed
        # ---------------------------------------------------------------------
        print("\n[3] Second pass with no changes...")
        stats = engine.run_pass()
        print(f"    Changed anything: {stats.changed}")

        # ---------------------------------------------------------------------
        # Step 4: Source changes
        # ---------------------------------------------------------------------
        print("\n[4] Modifying, adding and deleting source files...")
        (source / "notes.txt").write_text("second draft")
        (source / "docs" / "guide.md").write_text("# Guide")
        (source / "docs" / "readme.md").unlink()

        status = engine.get_sync_status()
        print(f"    In sync before pass: {status['in_sync']}")
        print(f"    Pending: {status['differences']}")

        engine.run_pass()
        print(f"    In sync after pass: {engine.get_sync_status()['in_sync']}")

        # ---------------------------------------------------------------------
        # Step 5: Periodic driver
        # ---------------------------------------------------------------------
        print("\n[5] Running PeriodicSync for three ticks...")
        runner = PeriodicSync(engine, interval_seconds=config.interval_seconds)
        worker = threading.Thread(target=runner.run, kwargs={"max_cycles": 3})
        worker.start()
        (source / "late.txt").write_text("picked up on a later tick")
        worker.join()
        print(f"    Cycles run: {runner.cycles}")

        close_sync_logger(engine.sync_logger)

        print("\n[6] Sync log:")
        for line in log_file.read_text(encoding="utf-8").splitlines():
            print(f"    {line}")

        print("\n" + "=" * 60)
        print("Example complete!")
        print("=" * 60)


if __name__ == "__main__":
    main()
