"""Tests for the folder_mirror package API."""

import pytest

import folder_mirror
from folder_mirror import mirror_once


class TestPublicApi:

    def test_exports(self):
        for name in folder_mirror.__all__:
            assert hasattr(folder_mirror, name)

    def test_mirror_once(self, populated_dirs, contents):
        stats = mirror_once(
            populated_dirs["source"],
            populated_dirs["replica"],
            populated_dirs["log"],
        )
        assert stats.success is True
        assert contents(populated_dirs["replica"]) == contents(populated_dirs["source"])

    def test_mirror_once_invalid(self, tmp_dirs):
        with pytest.raises(ValueError, match="Source folder does not exist"):
            mirror_once(tmp_dirs["root"] / "nope", tmp_dirs["replica"], tmp_dirs["log"])
