"""Configuration dataclasses for Folder Mirror."""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class SyncAction(Enum):
    """Action taken on a single file during a sync pass."""
    COPIED = "Copied"
    DELETED = "Deleted"


class HashAlgorithm(Enum):
    """Digest used to decide whether two files have identical content."""
    MD5 = "md5"          # 128-bit, default
    XXH128 = "xxh128"    # 128-bit, non-cryptographic, fast
    SHA256 = "sha256"


@dataclass
class MirrorConfig:
    """Configuration for one source -> replica mirror.

    Attributes:
        source_path: Authoritative directory
        replica_path: Directory kept identical to the source
        log_file: Append-only sync log
        interval_seconds: Wait between two sync passes
        algorithm: Digest used for content comparison
        isolate_file_errors: Keep going when a single file fails to
            compare, copy or delete instead of aborting the pass
        echo_to_console: Mirror every sync log line to stdout
    """
    source_path: Path
    replica_path: Path
    log_file: Path
    interval_seconds: float = 5.0
    algorithm: HashAlgorithm = HashAlgorithm.MD5
    isolate_file_errors: bool = True
    echo_to_console: bool = True

    def __post_init__(self):
        """Ensure paths are Path objects and the algorithm is an enum."""
        if isinstance(self.source_path, str):
            self.source_path = Path(self.source_path)
        if isinstance(self.replica_path, str):
            self.replica_path = Path(self.replica_path)
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)
        if isinstance(self.algorithm, str):
            self.algorithm = HashAlgorithm(self.algorithm.lower())


def _is_within(path: Path, other: Path) -> bool:
    try:
        path.relative_to(other)
    except ValueError:
        return False
    return True


def validate_config(config: MirrorConfig) -> Optional[str]:
    """Validate a mirror configuration before the first pass.

    Args:
        config: Configuration to validate

    Returns:
        str: Error message for the operator if invalid, None if valid
    """
    if not config.source_path.is_dir():
        return "Source folder does not exist."
    if not config.replica_path.is_dir():
        return "Replica folder does not exist."
    if config.interval_seconds <= 0:
        return "Interval must be positive"

    source = Path(os.path.realpath(config.source_path))
    replica = Path(os.path.realpath(config.replica_path))
    if _is_within(source, replica) or _is_within(replica, source):
        return "Source and replica folders must not overlap."

    return None
