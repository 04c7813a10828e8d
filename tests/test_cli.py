"""End-to-end tests for the author command line."""

from functools import partial
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from author.__main__ import main, parse_args
from author.cli import run_add, run_list, run_remove
from author.errors import SelectionCancelled
from author.repositories import root


def run_main(argv: list[str]) -> int:
    """Run main() and return its exit code."""
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.fixture
def in_repo(repo_root: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run commands from inside the temporary repository."""
    monkeypatch.chdir(repo_root)
    return repo_root


@pytest.fixture
def outside_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run commands from a directory with no repository marker above it."""
    monkeypatch.setattr(
        "author.services.author_service.find_repo_root",
        partial(root.find_repo_root, marker=".no-such-marker-for-tests"),
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestParseArgs:
    """Tests for argument parsing."""

    def test_no_command_lists(self):
        assert parse_args([]).command is None

    def test_add_logins(self):
        args = parse_args(["add", "a", "b"])
        assert args.command == "add"
        assert args.logins == ["a", "b"]

    def test_remove_without_logins(self):
        args = parse_args(["remove"])
        assert args.command == "remove"
        assert args.logins == []

    def test_unknown_command_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["rename", "a"])
        assert exc_info.value.code == 2


class TestScenarios:
    """Command behaviour through main()."""

    def test_list_empty_shows_notice(self, in_repo: Path, capsys: pytest.CaptureFixture[str]):
        assert run_main([]) == 0

        out = capsys.readouterr().out
        assert out == "no authors specified, run author add login to add them\n"
        assert not (in_repo / "author.txt").exists()

    def test_add_to_empty_root(self, in_repo: Path):
        assert run_main(["add", "jane.doe", "john.smith"]) == 0

        assert (in_repo / "author.txt").read_text() == "jane.doe john.smith\n"

    def test_list_unsorted_file(self, in_repo: Path, capsys: pytest.CaptureFixture[str]):
        (in_repo / "author.txt").write_text("john.smith jane.doe\n")

        assert run_main([]) == 0

        assert capsys.readouterr().out == "jane.doe\njohn.smith\n"
        assert (in_repo / "author.txt").read_text() == "john.smith jane.doe\n"

    def test_remove_login(self, in_repo: Path):
        (in_repo / "author.txt").write_text("jane.doe john.smith\n")

        assert run_main(["remove", "jane.doe"]) == 0

        assert (in_repo / "author.txt").read_text() == "john.smith\n"

    def test_add_without_logins(self, in_repo: Path, capsys: pytest.CaptureFixture[str]):
        assert run_main(["add"]) == 2

        assert "at least one login" in capsys.readouterr().err
        assert not (in_repo / "author.txt").exists()

    def test_outside_repository(self, outside_repo: Path, capsys: pytest.CaptureFixture[str]):
        assert run_main(["add", "jane.doe"]) == 3

        assert "Not inside a git repository" in capsys.readouterr().err
        assert not (outside_repo / "author.txt").exists()

    def test_list_outside_repository(self, outside_repo: Path):
        assert run_main([]) == 3

    def test_from_subdirectory(self, in_repo: Path, monkeypatch: pytest.MonkeyPatch):
        nested = in_repo / "src" / "pkg"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        assert run_main(["add", "a"]) == 0

        assert (in_repo / "author.txt").read_text() == "a\n"
        assert not (nested / "author.txt").exists()

    def test_add_reports_count(self, in_repo: Path, capsys: pytest.CaptureFixture[str]):
        run_main(["add", "a"])
        assert "1 author in" in capsys.readouterr().out

        run_main(["add", "b", "c"])
        assert "3 authors in" in capsys.readouterr().out

    def test_write_failure(self, in_repo: Path, capsys: pytest.CaptureFixture[str]):
        (in_repo / "author.txt").mkdir()

        assert run_main(["add", "a"]) == 4
        assert "Cannot" in capsys.readouterr().err

    def test_undecodable_file(self, in_repo: Path, capsys: pytest.CaptureFixture[str]):
        """A corrupt author file is reported and left as it was."""
        (in_repo / "author.txt").write_bytes(b"jane\xff\xfe doe\n")

        assert run_main(["add", "x"]) == 4

        assert "Cannot read" in capsys.readouterr().err
        assert (in_repo / "author.txt").read_bytes() == b"jane\xff\xfe doe\n"

    def test_start_dir_ignores_environment(
        self, in_repo: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        """Root discovery always starts from the working directory."""
        other = tmp_path / "other"
        (other / ".git").mkdir(parents=True)
        monkeypatch.setenv("AUTHOR_START_DIR", str(other))

        assert run_main(["add", "x"]) == 0

        assert (in_repo / "author.txt").read_text() == "x\n"
        assert not (other / "author.txt").exists()


class TestRunRemoveInteractive:
    """Interactive removal with an injected selector."""

    def test_selection_is_removed(self, repo_root: Path):
        (repo_root / "author.txt").write_text("a b c\n")
        selector = MagicMock(return_value=["b"])

        assert run_remove(repo_root, [], selector) == 0

        selector.assert_called_once_with(["a", "b", "c"])
        assert (repo_root / "author.txt").read_text() == "a c\n"

    def test_cancel_exits_cleanly_without_write(self, repo_root: Path):
        (repo_root / "author.txt").write_text("c b a\n")
        selector = MagicMock(side_effect=SelectionCancelled("Selection cancelled"))

        assert run_remove(repo_root, [], selector) == 0

        assert (repo_root / "author.txt").read_text() == "c b a\n"

    def test_nothing_to_select(self, repo_root: Path, capsys: pytest.CaptureFixture[str]):
        selector = MagicMock()

        assert run_remove(repo_root, [], selector) == 0

        selector.assert_not_called()
        assert capsys.readouterr().out == ""
        assert not (repo_root / "author.txt").exists()


class TestRunners:
    """Direct calls to the run_* functions."""

    def test_run_list_uses_program_name(
        self, repo_root: Path, capsys: pytest.CaptureFixture[str]
    ):
        assert run_list(repo_root, "authors-tool") == 0
        assert "authors-tool add login" in capsys.readouterr().out

    def test_run_add_then_list(self, repo_root: Path, capsys: pytest.CaptureFixture[str]):
        assert run_add(repo_root, ["b", "a", "b"]) == 0
        capsys.readouterr()

        assert run_list(repo_root) == 0
        assert capsys.readouterr().out == "a\nb\n"
