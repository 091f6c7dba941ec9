"""Shared pytest fixtures for Folder Mirror tests.

Provides temp source/replica directories, config objects, and a helper for
reading the sync log.
"""

import pytest

from folder_mirror.config import MirrorConfig
from folder_mirror.sync.engine import MirrorEngine
from folder_mirror.utils.logging import close_sync_logger


@pytest.fixture
def tmp_dirs(tmp_path):
    """Create temporary source and replica directories for testing."""
    source = tmp_path / "source"
    replica = tmp_path / "replica"
    source.mkdir()
    replica.mkdir()
    return {
        "source": source,
        "replica": replica,
        "log": tmp_path / "sync.log",
        "root": tmp_path,
    }


@pytest.fixture
def sample_config(tmp_dirs):
    """Create a sample MirrorConfig with temp directories."""
    return MirrorConfig(
        source_path=tmp_dirs["source"],
        replica_path=tmp_dirs["replica"],
        log_file=tmp_dirs["log"],
        interval_seconds=0.01,
        echo_to_console=False,
    )


@pytest.fixture
def engine(sample_config):
    """MirrorEngine over the temp directories; its log handlers are closed afterwards."""
    mirror = MirrorEngine(sample_config)
    yield mirror
    close_sync_logger(mirror.sync_logger)


@pytest.fixture
def populated_dirs(tmp_dirs):
    """Create temp directories with sample files in the source."""
    source = tmp_dirs["source"]

    (source / "file1.txt").write_text("hello world")
    (source / "file2.json").write_text('{"key": "value"}')
    (source / "subdir").mkdir()
    (source / "subdir" / "nested.txt").write_text("nested content")
    (source / "subdir" / "deeper").mkdir()
    (source / "subdir" / "deeper" / "deep.txt").write_text("deep")
    (source / "data.bin").write_bytes(b"\x00\x01\x02\x03" * 100)

    return tmp_dirs


@pytest.fixture
def read_log(tmp_dirs):
    """Return the sync log's lines with the timestamp prefix stripped."""
    def _read():
        if not tmp_dirs["log"].exists():
            return []
        lines = tmp_dirs["log"].read_text(encoding="utf-8").splitlines()
        # "YYYY-MM-DD HH:MM:SS: <message>"
        return [line.split(": ", 1)[1] for line in lines]
    return _read


def tree_contents(root):
    """Map of relative path -> bytes for every file under root."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in root.rglob("*")
        if path.is_file()
    }


@pytest.fixture
def contents():
    return tree_contents
