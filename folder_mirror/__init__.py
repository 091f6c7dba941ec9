"""Folder Mirror - one-way periodic mirroring of a directory tree.

Keeps a replica directory identical to a source directory: new and changed
files are copied over, files that exist only in the replica are deleted, and
every action is appended to a log file.

Key Features:
    - Content comparison by full-file digest (md5 by default, xxh128, sha256)
    - Atomic replacement of replica files
    - Per-file failure isolation so one locked file doesn't stall the rest
    - Engine runs a single pass; scheduling is a separate, stoppable loop

Quick Start:
    from folder_mirror import MirrorEngine, MirrorConfig

    engine = MirrorEngine(MirrorConfig(
        source_path="./data",
        replica_path="./backup",
        log_file="./mirror.log",
    ))
    stats = engine.run_pass()
    print(stats.copied, stats.deleted)

Command line:
    python -m folder_mirror SOURCE REPLICA LOG_FILE

Classes:
    MirrorEngine: Runs one forward + reverse sync pass
    PeriodicSync: Runs the engine on a fixed interval
    MirrorConfig: Paths and comparison settings
    SyncStats: Result of a single pass
    SyncAction: Enum of logged actions (COPIED, DELETED)
    HashAlgorithm: Enum of supported digests
"""

__version__ = "1.0.0"
__license__ = "MIT"

from typing import Union
from pathlib import Path

# Core configuration classes
from .config import (
    MirrorConfig,
    SyncAction,
    HashAlgorithm,
    validate_config,
)

# Sync components
from .sync.engine import MirrorEngine, SyncStats
from .sync.scheduler import PeriodicSync
from .utils.logging import close_sync_logger

# Public API
__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Main classes
    "MirrorEngine",
    "PeriodicSync",
    "MirrorConfig",
    "SyncStats",
    # Enums
    "SyncAction",
    "HashAlgorithm",
    # Helpers
    "validate_config",
    "mirror_once",
]


def mirror_once(
    source_path: Union[str, Path],
    replica_path: Union[str, Path],
    log_file: Union[str, Path],
    echo_to_console: bool = False,
) -> SyncStats:
    """Convenience function to run a single sync pass.

    Args:
        source_path: Authoritative directory
        replica_path: Directory to bring in line with the source
        log_file: Append-only sync log
        echo_to_console: Also print each log line to stdout

    Returns:
        SyncStats for the pass

    Raises:
        ValueError: If the configuration is invalid

    Example:
        stats = mirror_once("./data", "./backup", "./mirror.log")
    """
    config = MirrorConfig(
        source_path=source_path,
        replica_path=replica_path,
        log_file=log_file,
        echo_to_console=echo_to_console,
    )

    validation_error = validate_config(config)
    if validation_error:
        raise ValueError(validation_error)

    engine = MirrorEngine(config)
    try:
        return engine.run_pass()
    finally:
        close_sync_logger(engine.sync_logger)
