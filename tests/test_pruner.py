"""Tests for directory pruning."""

import os

import pytest

from conftest import read_actions, snapshot, write_file
from music_reorganizer.core.action_log import open_action_log
from music_reorganizer.core.pruner import prune_directories
from music_reorganizer.exceptions import ConfigurationError
from music_reorganizer.models.config import PruneConfig


def run(tmp_path, root, keep="mp3", dry_run=False, log_name="actions.log"):
    config = PruneConfig(dir=root, file_ext=keep, log_file=tmp_path / log_name, dry_run=dry_run)
    with open_action_log(config.log_file) as action_log:
        report = prune_directories(config, action_log)
    return report


def build_tree(root):
    write_file(root / "Rock" / "Song" / "01.mp3")
    write_file(root / "Rock" / "Song" / "cover.jpg")
    write_file(root / "Rock" / "Song" / "01.mp3.bak")
    write_file(root / "Rock" / "Old" / "notes.txt")
    write_file(root / "Jazz" / "Gone" / "Deeper" / "thumbs.db")
    (root / "Empty" / "Nested").mkdir(parents=True)
    write_file(root / "stray.log")


class TestPruneDirectories:

    def test_remaining_files_contain_extension(self, tmp_path):
        root = tmp_path / "music"
        build_tree(root)

        run(tmp_path, root)

        remaining = sorted(str(p.relative_to(root)) for p in root.rglob("*") if p.is_file())
        assert remaining == [
            os.path.join("Rock", "Song", "01.mp3"),
            os.path.join("Rock", "Song", "01.mp3.bak"),
        ]

    def test_no_empty_directories_remain(self, tmp_path):
        root = tmp_path / "music"
        build_tree(root)

        report = run(tmp_path, root)

        dirs = sorted(str(p.relative_to(root)) for p in root.rglob("*") if p.is_dir())
        assert dirs == ["Rock", os.path.join("Rock", "Song")]
        assert root.exists()
        assert report.deleted == 4
        assert report.removed_dirs == 6

    def test_substring_match(self, tmp_path):
        """Test that the keep extension matches anywhere in the name."""
        root = tmp_path / "music"
        write_file(root / "mp3-notes.txt")
        write_file(root / "song.mp3.bak")
        write_file(root / "song.flac")

        run(tmp_path, root)

        assert sorted(p.name for p in root.iterdir()) == ["mp3-notes.txt", "song.mp3.bak"]

    def test_delete_pass_runs_before_removal_pass(self, tmp_path):
        root = tmp_path / "music"
        write_file(root / "A" / "junk.txt")

        run(tmp_path, root)

        assert read_actions(tmp_path / "actions.log") == [
            f"deleting {root / 'A' / 'junk.txt'}",
            f"unlinking {root / 'A'}",
        ]

    def test_deepest_first(self, tmp_path):
        root = tmp_path / "music"
        write_file(root / "A" / "top.txt")
        write_file(root / "A" / "B" / "deep.txt")

        run(tmp_path, root)

        assert read_actions(tmp_path / "actions.log") == [
            f"deleting {root / 'A' / 'B' / 'deep.txt'}",
            f"deleting {root / 'A' / 'top.txt'}",
            f"unlinking {root / 'A' / 'B'}",
            f"unlinking {root / 'A'}",
        ]

    def test_dry_run_changes_nothing(self, tmp_path):
        root = tmp_path / "music"
        build_tree(root)
        before = snapshot(root)

        report = run(tmp_path, root, dry_run=True)

        assert snapshot(root) == before
        assert report.deleted == 4
        assert report.removed_dirs == 6

    def test_dry_run_trail_matches_real_run(self, tmp_path):
        dry_root, real_root = tmp_path / "dry", tmp_path / "real"
        build_tree(dry_root)
        build_tree(real_root)

        run(tmp_path, dry_root, dry_run=True, log_name="dry.log")
        run(tmp_path, real_root, log_name="real.log")

        dry = [line.replace(str(dry_root), "<root>") for line in read_actions(tmp_path / "dry.log")]
        real = [line.replace(str(real_root), "<root>") for line in read_actions(tmp_path / "real.log")]
        assert dry == real

    def test_root_is_kept_when_empty(self, tmp_path):
        root = tmp_path / "music"
        write_file(root / "junk.txt")

        run(tmp_path, root)

        assert root.exists()
        assert list(root.iterdir()) == []

    def test_missing_root(self, tmp_path):
        with pytest.raises(ConfigurationError, match="dir does not exist"):
            run(tmp_path, tmp_path / "missing")
