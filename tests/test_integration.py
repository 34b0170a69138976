"""End-to-end tests: real git, real tree, real CLI entry point."""

import json
import sys
from pathlib import Path

import pytest

from next_refactor import FilterSpec, GitChangeCounter, TreeWalker, rank
from next_refactor.cli import main


@pytest.fixture
def history(git_repo, monkeypatch):
    """A repository where b.txt changed most, then src/core.py, then a.txt."""
    git_repo.commit("a.txt", "b.txt", "src/core.py", "build/gen.c", message="initial")
    git_repo.commit("b.txt", "src/core.py", message="second")
    git_repo.commit("b.txt", "build/gen.c", message="third")
    git_repo.commit("b.txt", "src/core.py", "build/gen.c", message="fourth")

    monkeypatch.setattr(Path, "home", lambda: git_repo.path / ".no-home")
    monkeypatch.chdir(git_repo.path)
    return git_repo


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["next-refactor", *args])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


class TestPipeline:
    def test_walk_and_rank(self, history):
        counter = GitChangeCounter(str(history.path))
        result = TreeWalker(str(history.path), "main", FilterSpec(), counter).walk()
        report = rank(result, 2)

        assert [(e.path, e.count) for e in report.entries] == [("b.txt", 4), ("build/gen.c", 3)]
        assert report.total_files == 4
        assert ".git" not in {e.path.split("/")[0] for e in result}


class TestCommandLine:
    def test_text_report(self, history, monkeypatch, capsys):
        assert run_cli(monkeypatch, "--filter", "build/*", "-n", "2") == 0

        out = capsys.readouterr().out
        assert "Entering .\nEntering build\nEntering src\n" in out
        assert "4\tb.txt\n3\tsrc/core.py\n" in out
        assert "gen.c" not in out
        assert "Scanned 3 files" in out

    def test_json_report(self, history, monkeypatch, capsys):
        assert run_cli(monkeypatch, "--format", "json") == 0

        data = json.loads(capsys.readouterr().out)
        assert data["entries"][0] == {"path": "b.txt", "count": 4}
        assert data["entries"][-1] == {"path": "a.txt", "count": 1}
        assert data["branch"] == "main"

    def test_unknown_branch_fails(self, history, monkeypatch, capsys):
        assert run_cli(monkeypatch, "--branch", "does-not-exist") == 1

        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "does-not-exist" in captured.err
        assert "Next to refactor" not in captured.out
