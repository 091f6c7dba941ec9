"""CLI entry point for Folder Mirror.

Usage:
    python -m folder_mirror SOURCE REPLICA LOG_FILE

Mirrors SOURCE onto REPLICA every 5 seconds until interrupted, appending one
line per copied or deleted file to LOG_FILE.
"""

import argparse
import sys

from folder_mirror import __version__
from folder_mirror.config import MirrorConfig, validate_config
from folder_mirror.sync.engine import MirrorEngine
from folder_mirror.sync.scheduler import PeriodicSync
from folder_mirror.utils.logging import close_sync_logger, configure_root_logger


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="folder_mirror",
        description=(
            f"Folder Mirror {__version__} - keep REPLICA an exact copy of "
            f"SOURCE, re-synchronizing every 5 seconds"
        ),
    )
    parser.add_argument("source", help="Source folder (authoritative)")
    parser.add_argument("replica", help="Replica folder (kept identical to source)")
    parser.add_argument("log_file", help="Log file that copy/delete actions are appended to")
    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for a clean stop, 1 for invalid folders)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    config = MirrorConfig(
        source_path=args.source,
        replica_path=args.replica,
        log_file=args.log_file,
    )

    validation_error = validate_config(config)
    if validation_error:
        print(validation_error, file=sys.stderr)
        return 1

    configure_root_logger()

    engine = MirrorEngine(config)
    runner = PeriodicSync(engine, interval_seconds=config.interval_seconds)

    print(
        f"Synchronizing {config.source_path} to {config.replica_path} "
        f"every {config.interval_seconds:g} seconds..."
    )

    try:
        runner.run()
    except KeyboardInterrupt:
        print("Stopped.")
    finally:
        close_sync_logger(engine.sync_logger)

    return 0


if __name__ == "__main__":
    sys.exit(main())
