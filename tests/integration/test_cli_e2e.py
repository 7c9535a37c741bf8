"""End-to-end tests driving the command line entry point on real trees."""

import pytest
from pathlib import Path
from unittest.mock import patch

from dircompare.cli import EXIT_FAILURE, EXIT_OK, main
from dircompare.compare import compare_directories

pytestmark = pytest.mark.integration


def _names(paths):
    return sorted(Path(p).name for p in paths)


def _argv(dir_a, dir_b, test_config, *extra):
    return [str(dir_a), str(dir_b), *extra, "--no-progress", "--output-dir", str(test_config.output_dir)]


class TestCompareDirectories:
    """Scenarios from the comparison contract."""

    def test_duplicate_and_unique(self, scenario_trees, test_config):
        dir_a, dir_b = scenario_trees

        comparison = compare_directories(dir_a, dir_b, config=test_config)

        assert _names(comparison.result.b_duplicates) == ["b.txt"]
        assert _names(comparison.result.b_unique) == ["c.txt"]

    def test_both_empty(self, tmp_path, test_config):
        (tmp_path / "A").mkdir()
        (tmp_path / "B").mkdir()

        comparison = compare_directories(tmp_path / "A", tmp_path / "B", config=test_config)

        assert comparison.result.b_duplicates == []
        assert comparison.result.b_unique == []

    def test_two_copies_in_b(self, make_tree, test_config):
        dir_a = make_tree("A", {"x.txt": "dup"})
        dir_b = make_tree("B", {"y1.txt": "dup", "y2.txt": "dup"})

        comparison = compare_directories(dir_a, dir_b, config=test_config)

        assert _names(comparison.result.b_duplicates) == ["y1.txt", "y2.txt"]
        assert comparison.result.b_unique == []

    def test_content_not_names(self, make_tree, test_config):
        """Same name with different content is unique; renamed copies are duplicates."""
        dir_a = make_tree("A", {"report.txt": "v1", "sub/photo.jpg": "pixels"})
        dir_b = make_tree("B", {"report.txt": "v2", "elsewhere/renamed.jpg": "pixels"})

        comparison = compare_directories(dir_a, dir_b, config=test_config)

        assert _names(comparison.result.b_duplicates) == ["renamed.jpg"]
        assert _names(comparison.result.b_unique) == ["report.txt"]


class TestCli:
    """Test the command line front end."""

    def test_all_actions(self, make_tree, test_config):
        """Test "you" deletes the duplicate and writes both list files."""
        dir_a = make_tree("A", {"a.txt": "hello"})
        dir_b = make_tree("B", {"b.txt": "hello", "c.txt": "world"})

        status = main(_argv(dir_a, dir_b, test_config, "you"))

        assert status == EXIT_OK
        assert not (dir_b / "b.txt").exists()
        assert (dir_b / "c.txt").exists()
        dup_lines = test_config.duplicates_path.read_text(encoding="utf-8").splitlines()
        unique_lines = test_config.unique_path.read_text(encoding="utf-8").splitlines()
        assert dup_lines == [str(dir_b / "b.txt")]
        assert unique_lines == [str(dir_b / "c.txt")]

    def test_prompt_used_without_action_argument(self, scenario_trees, test_config):
        """Test the injected prompt supplies the selector."""
        dir_a, dir_b = scenario_trees
        asked = []

        def prompt(text):
            asked.append(text)
            return "o\n"

        status = main(_argv(dir_a, dir_b, test_config), prompt=prompt)

        assert status == EXIT_OK
        assert len(asked) == 1
        assert test_config.duplicates_path.exists()
        assert not test_config.unique_path.exists()
        assert (dir_b / "b.txt").exists()

    def test_prompt_not_used_with_action_argument(self, scenario_trees, test_config):
        dir_a, dir_b = scenario_trees

        def prompt(text):
            raise AssertionError("prompt should not be called")

        assert main(_argv(dir_a, dir_b, test_config, "u"), prompt=prompt) == EXIT_OK
        assert test_config.unique_path.exists()

    def test_prompt_eof_means_no_action(self, scenario_trees, test_config):
        dir_a, dir_b = scenario_trees

        def prompt(text):
            raise EOFError

        assert main(_argv(dir_a, dir_b, test_config), prompt=prompt) == EXIT_OK
        assert (dir_b / "b.txt").exists()

    def test_missing_arguments(self, tmp_path, capsys):
        """Test fewer than two directories prints usage and does no work."""
        status = main([str(tmp_path)])

        assert status == EXIT_FAILURE
        assert "usage: dircompare" in capsys.readouterr().err

    def test_no_arguments(self, capsys):
        assert main([]) == EXIT_FAILURE
        assert "usage" in capsys.readouterr().err

    def test_unreadable_root(self, tmp_path, test_config, capsys):
        """Test a missing root aborts with a message and non-zero status."""
        (tmp_path / "B").mkdir()

        status = main(_argv(tmp_path / "missing", tmp_path / "B", test_config, "you"))

        assert status == EXIT_FAILURE
        assert "does not exist" in capsys.readouterr().err
        assert not test_config.duplicates_path.exists()

    def test_invalid_override(self, scenario_trees, test_config, capsys):
        dir_a, dir_b = scenario_trees

        status = main(_argv(dir_a, dir_b, test_config, "o", "--algorithm", "nope"))

        assert status == EXIT_FAILURE
        assert "Invalid configuration" in capsys.readouterr().err

    def test_summary_printed(self, scenario_trees, test_config, capsys):
        dir_a, dir_b = scenario_trees

        main(_argv(dir_a, dir_b, test_config, "n"))
        out = capsys.readouterr().out

        assert "Duplicate files in B: 1" in out
        assert "Files unique to B: 1" in out
        assert "Only in B" in out

    def test_extra_arguments_are_ignored(self, scenario_trees, test_config):
        """Test trailing positional arguments after the actions do not fail the run."""
        dir_a, dir_b = scenario_trees

        status = main(_argv(dir_a, dir_b, test_config, "u", "leftover", "more"))

        assert status == EXIT_OK
        assert test_config.unique_path.exists()


class TestIsolatedFailuresExitStatus:
    """Isolated delete and output failures are reported but exit zero."""

    def test_delete_failure_still_exits_ok(self, scenario_trees, test_config, capsys):
        dir_a, dir_b = scenario_trees

        with patch("dircompare.actions.os.remove", side_effect=PermissionError(13, "Permission denied")):
            status = main(_argv(dir_a, dir_b, test_config, "yu"))

        assert status == EXIT_OK
        out = capsys.readouterr().out
        assert "Delete failed" in out
        assert "Permission denied" in out
        assert (dir_b / "b.txt").exists()
        assert test_config.unique_path.read_text(encoding="utf-8").splitlines() == [str(dir_b / "c.txt")]

    def test_output_write_failure_still_exits_ok(self, scenario_trees, tmp_path, capsys):
        dir_a, dir_b = scenario_trees
        missing_dir = tmp_path / "no_such_dir"

        status = main([str(dir_a), str(dir_b), "ou", "--no-progress", "--output-dir", str(missing_dir)])

        assert status == EXIT_OK
        out = capsys.readouterr().out
        assert "Cannot write" in out
        assert "BSame_files.txt" in out
        assert "BUnique_files.txt" in out
        assert not missing_dir.exists()
