"""Sync engine for Folder Mirror.

Philosophy: SOURCE IS TRUTH, REPLICA IS DISPOSABLE.

MirrorEngine runs one synchronous pass at a time:
- forward pass: copy every source file that is missing from the replica or
  whose content differs
- reverse pass: delete every replica file that no longer exists in the source

Each pass recomputes everything from the two trees; nothing is cached between
passes. Scheduling passes is left to the caller (see scheduler.py).
"""

import logging
import os
import shutil
import time
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from folder_mirror.config import MirrorConfig, SyncAction
from folder_mirror.utils.hashing import files_equal
from folder_mirror.utils.logging import get_sync_logger
from folder_mirror.utils.tree import counterpart, is_regular_file, list_files

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".mirror-tmp"


@dataclass
class SyncStats:
    """Statistics from a sync pass."""

    success: bool = True

    # File counts
    files_copied: int = 0
    files_deleted: int = 0
    files_unchanged: int = 0
    files_failed: int = 0

    # Size stats
    bytes_copied: int = 0

    # Relative paths acted on, in the order the actions happened
    copied: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)

    # Timing
    started_at: float = 0.0
    completed_at: float = 0.0
    duration_ms: float = 0.0

    # Errors
    errors: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """True if the pass copied or deleted anything."""
        return bool(self.files_copied or self.files_deleted)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "success": self.success,
            "files_copied": self.files_copied,
            "files_deleted": self.files_deleted,
            "files_unchanged": self.files_unchanged,
            "files_failed": self.files_failed,
            "bytes_copied": self.bytes_copied,
            "copied": self.copied,
            "deleted": self.deleted,
            "duration_ms": self.duration_ms,
            "errors": self.errors,
        }


class MirrorEngine:
    """One-way mirror of a source tree onto a replica tree.

    Attributes:
        config: MirrorConfig with paths and comparison settings
        sync_logger: Logger receiving one "Copied: ..." / "Deleted: ..."
            line per action
    """

    def __init__(
        self,
        config: MirrorConfig,
        sync_logger: Optional[logging.Logger] = None
    ):
        """Initialize the engine.

        Args:
            config: Configuration for this mirror
            sync_logger: Where actions are reported.
                         Defaults to get_sync_logger(config.log_file).
        """
        self.config = config
        self.source_path = Path(config.source_path)
        self.replica_path = Path(config.replica_path)
        self._owns_sync_logger = sync_logger is None
        self.sync_logger = sync_logger or self._open_sync_logger()

    def _open_sync_logger(self) -> logging.Logger:
        return get_sync_logger(
            self.config.log_file,
            console=self.config.echo_to_console
        )

    def run_pass(self) -> SyncStats:
        """Run one complete forward + reverse pass.

        Returns:
            SyncStats with pass details

        Raises:
            OSError: If either tree can't be enumerated, if the sync log
                can't be written, or on any per-file failure when
                config.isolate_file_errors is False
        """
        stats = SyncStats(started_at=time.time())

        self._forward_pass(stats)
        # Fresh enumeration of the replica, including what was just copied
        self._reverse_pass(stats)

        stats.success = stats.files_failed == 0
        return self._finalize_stats(stats)

    def _forward_pass(self, stats: SyncStats) -> None:
        """Copy new and modified files from source to replica."""
        for rel_path in sorted(list_files(self.source_path)):
            src = counterpart(rel_path, self.source_path)
            dst = counterpart(rel_path, self.replica_path)

            try:
                if is_regular_file(dst) and files_equal(src, dst, self.config.algorithm):
                    stats.files_unchanged += 1
                    continue
                stats.bytes_copied += self._copy_file(src, dst)
            except OSError as e:
                self._record_failure(stats, f"Failed to copy {rel_path}: {e}")
                continue

            stats.files_copied += 1
            stats.copied.append(rel_path)
            self._report(SyncAction.COPIED, rel_path)

    def _reverse_pass(self, stats: SyncStats) -> None:
        """Delete replica files with no counterpart in the source."""
        for rel_path in sorted(list_files(self.replica_path)):
            if is_regular_file(counterpart(rel_path, self.source_path)):
                continue

            try:
                counterpart(rel_path, self.replica_path).unlink()
            except OSError as e:
                self._record_failure(stats, f"Failed to delete {rel_path}: {e}")
                continue

            stats.files_deleted += 1
            stats.deleted.append(rel_path)
            self._report(SyncAction.DELETED, rel_path)

    def _copy_file(self, src: Path, dst: Path) -> int:
        """Copy file content to dst through a temporary sibling.

        The temporary file is renamed over dst only once the copy is
        complete, so dst never holds a partial copy.

        Returns:
            Number of bytes copied
        """
        dst.parent.mkdir(parents=True, exist_ok=True)
        # Fixed-length name, independent of dst.name
        tmp = dst.with_name(f".mirror-{uuid.uuid4().hex}{TEMP_SUFFIX}")

        delete_tmp = True
        try:
            shutil.copyfile(src, tmp)
            os.replace(tmp, dst)
            delete_tmp = False
        finally:
            # Remove the temp copy, complete or partial, if there are any errors
            if delete_tmp:
                tmp.unlink(missing_ok=True)

        return dst.stat().st_size

    def _record_failure(self, stats: SyncStats, message: str) -> None:
        """Count a per-file failure, or re-raise it if failures aren't isolated.

        Must be called from inside an except block.
        """
        if not self.config.isolate_file_errors:
            raise
        stats.files_failed += 1
        stats.errors.append(message)
        logger.warning(message)

    def _report(self, action: SyncAction, rel_path: str) -> None:
        if self._owns_sync_logger and not self.sync_logger.handlers:
            # Closed through another engine sharing the same log file
            self.sync_logger = self._open_sync_logger()
        self.sync_logger.info(f"{action.value}: {rel_path}")

    def _finalize_stats(self, stats: SyncStats) -> SyncStats:
        """Finalize stats with timing info.

        Args:
            stats: Stats object to finalize

        Returns:
            Finalized stats
        """
        stats.completed_at = time.time()
        stats.duration_ms = (stats.completed_at - stats.started_at) * 1000

        level = logging.INFO if stats.changed or stats.files_failed else logging.DEBUG
        logger.log(
            level,
            f"Sync pass: "
            f"{stats.files_copied} copied, "
            f"{stats.files_deleted} deleted, "
            f"{stats.files_unchanged} unchanged, "
            f"{stats.files_failed} failed "
            f"in {stats.duration_ms:.1f}ms"
        )

        return stats

    def plan(self) -> Dict[str, List[str]]:
        """Work out what the next pass would do, without touching the replica.

        Returns:
            Dict with sorted relative paths under keys:
                - "copy": Missing from the replica or with different content
                - "delete": In the replica but not in the source
                - "unchanged": Identical in both
        """
        source_files = list_files(self.source_path)
        replica_files = list_files(self.replica_path)

        copy = []
        unchanged = []
        for rel_path in sorted(source_files):
            if rel_path in replica_files and self._planned_equal(rel_path):
                unchanged.append(rel_path)
            else:
                copy.append(rel_path)

        return {
            "copy": copy,
            "delete": sorted(replica_files - source_files),
            "unchanged": unchanged,
        }

    def _planned_equal(self, rel_path: str) -> bool:
        """Content comparison for plan(); an unreadable file counts as different."""
        try:
            return files_equal(
                counterpart(rel_path, self.source_path),
                counterpart(rel_path, self.replica_path),
                self.config.algorithm,
            )
        except OSError as e:
            if not self.config.isolate_file_errors:
                raise
            logger.warning(f"Failed to compare {rel_path}: {e}")
            return False

    def get_sync_status(self) -> Dict[str, Any]:
        """Get current sync status between source and replica.

        Returns:
            Dict with sync status info
        """
        result = {
            "source_path": str(self.source_path),
            "replica_path": str(self.replica_path),
            "source_exists": self.source_path.is_dir(),
            "replica_exists": self.replica_path.is_dir(),
            "in_sync": False,
            "differences": None,
        }

        if not result["source_exists"] or not result["replica_exists"]:
            return result

        plan = self.plan()

        result["in_sync"] = not (plan["copy"] or plan["delete"])
        result["differences"] = {
            "to_copy": plan["copy"],
            "to_delete": plan["delete"],
            "identical": len(plan["unchanged"]),
        }

        return result
