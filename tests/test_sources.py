# test_sources.py

import subprocess
import pytest
from unittest.mock import Mock, patch

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from filepick.errors import ItemSourceError
from filepick.items import GitItemSource, FileItemSource, StaticItemSource


def completed(cmd, stdout="", returncode=0, stderr=""):
    return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)


class TestGitItemSource:
    """Tracked-file listing through git."""

    def test_lists_files_from_repository_root(self):
        def fake_run(cmd, **kwargs):
            if cmd[:2] == ["git", "rev-parse"]:
                return completed(cmd, "/work/repo\n")
            assert kwargs["cwd"] == "/work/repo"
            return completed(cmd, "a.rb\nlib/b.rb\nREADME.md\n")

        logger = Mock()
        with patch("filepick.items.source.subprocess.run", side_effect=fake_run) as run:
            files = GitItemSource("/work/repo/lib", logger=logger).items()

        assert files == ["a.rb", "lib/b.rb", "README.md"]
        assert run.call_args_list[0].kwargs["cwd"] == "/work/repo/lib"
        logger.debug.assert_called_once()

    def test_not_a_repository(self):
        failure = completed(["git"], returncode=128, stderr="fatal: not a git repository\n")
        with patch("filepick.items.source.subprocess.run", return_value=failure):
            with pytest.raises(ItemSourceError, match="not a git repository"):
                GitItemSource().items()

    def test_git_missing(self):
        with patch("filepick.items.source.subprocess.run", side_effect=FileNotFoundError("git")):
            with pytest.raises(ItemSourceError, match="git is not available"):
                GitItemSource().items()


class TestFileItemSource:
    """Items read from a text file."""

    def test_reads_non_blank_lines(self, tmp_path):
        path = tmp_path / "items.txt"
        path.write_text("a.rb\n\n  b.rb  \nc.py\n", encoding="utf-8")
        assert FileItemSource(str(path)).items() == ["a.rb", "b.rb", "c.py"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ItemSourceError):
            FileItemSource(str(tmp_path / "missing.txt")).items()


class TestStaticItemSource:
    def test_returns_copy(self):
        source = StaticItemSource(["a", "b"])
        items = source.items()
        items.append("c")
        assert source.items() == ["a", "b"]
