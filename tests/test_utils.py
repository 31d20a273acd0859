"""
Tests for the dataset providers and the file sink.
"""

import subprocess
from pathlib import Path

import pytest

from domain_tree.errors import DatasetFetchError, DirectoryNotFound, SinkWriteError
from domain_tree.utils import DirectoryDataset, FileSink, GitDataset, copy_dir


class TestFileSink:

    def test_write_creates_directories(self, tmp_path):
        sink = FileSink(tmp_path / "nested" / "out")

        written = sink.write("tree.json", b"{}")

        assert written == tmp_path / "nested" / "out" / "tree.json"
        assert written.read_bytes() == b"{}"

    def test_write_failure_raises(self, tmp_path):
        blocker = tmp_path / "out"
        blocker.write_text("not a directory")

        with pytest.raises(SinkWriteError) as exc_info:
            FileSink(blocker).write("tree.json", b"{}")

        assert exc_info.value.destination == str(blocker / "tree.json")


class TestDirectoryDataset:

    def test_existing_directory(self, tmp_path):
        assert DirectoryDataset(tmp_path).prepare() == tmp_path

    def test_missing_directory(self, tmp_path):
        with pytest.raises(DirectoryNotFound):
            DirectoryDataset(tmp_path / "data").prepare()


class TestGitDataset:

    def test_clone_copies_data_directory(self, tmp_path, monkeypatch):
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append(cmd)
            clone_dir = Path(cmd[-1])
            (clone_dir / "data" / "geo").mkdir(parents=True)
            (clone_dir / "data" / "category-ads").write_text("include:ads-google\n")
            (clone_dir / "data" / "geo" / "cn.dat").write_text("full:example.cn\n")
            (clone_dir / "README.md").write_text("readme")
            return subprocess.CompletedProcess(cmd, 0, "", "")

        monkeypatch.setattr("domain_tree.utils.dataset.subprocess.run", fake_run)
        data_dir = tmp_path / "data"
        data_dir.mkdir()
        (data_dir / "stale").write_text("old")

        result = GitDataset(data_dir, repo_url="https://example.test/repo.git").prepare()

        assert result == data_dir
        assert calls[0][:3] == ["git", "clone", "--depth=1"]
        assert calls[0][3] == "https://example.test/repo.git"
        assert sorted(p.relative_to(data_dir).as_posix() for p in data_dir.rglob("*") if p.is_file()) == [
            "category-ads",
            "geo/cn.dat",
        ]

    def test_clone_failure_raises(self, tmp_path, monkeypatch):
        def fake_run(cmd, **kwargs):
            raise subprocess.CalledProcessError(128, cmd, stderr="fatal: repository not found\n")

        monkeypatch.setattr("domain_tree.utils.dataset.subprocess.run", fake_run)

        with pytest.raises(DatasetFetchError, match="repository not found"):
            GitDataset(tmp_path / "data").prepare()

    def test_missing_git_raises(self, tmp_path, monkeypatch):
        def fake_run(cmd, **kwargs):
            raise FileNotFoundError("git")

        monkeypatch.setattr("domain_tree.utils.dataset.subprocess.run", fake_run)

        with pytest.raises(DatasetFetchError, match="git executable not found"):
            GitDataset(tmp_path / "data").prepare()

    def test_repository_without_data_directory(self, tmp_path, monkeypatch):
        def fake_run(cmd, **kwargs):
            Path(cmd[-1]).mkdir(parents=True)
            return subprocess.CompletedProcess(cmd, 0, "", "")

        monkeypatch.setattr("domain_tree.utils.dataset.subprocess.run", fake_run)

        with pytest.raises(DatasetFetchError, match="data/ not found"):
            GitDataset(tmp_path / "data").prepare()


def test_copy_dir(tmp_path):
    source = tmp_path / "src"
    (source / "a" / "b").mkdir(parents=True)
    (source / "a" / "b" / "leaf").write_text("x")
    (source / "top").write_text("y")

    copy_dir(source, tmp_path / "dst")

    assert (tmp_path / "dst" / "a" / "b" / "leaf").read_text() == "x"
    assert (tmp_path / "dst" / "top").read_text() == "y"
