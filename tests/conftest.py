"""
gitfindr Test Fixtures

Builds throwaway directory trees with .git markers and points the data
directory at tmp_path so tests never touch ~/.config/gitfindr.

Run with: pytest tests/ -v
"""
import pytest


@pytest.fixture
def make_repo(tmp_path):
    """Create a directory containing a .git marker and return its path."""
    def _make(relative, marker_is_file=False):
        repo = tmp_path / relative
        repo.mkdir(parents=True, exist_ok=True)
        marker = repo / ".git"
        if marker_is_file:
            marker.write_text("gitdir: /elsewhere/.git/worktrees/x\n")
        else:
            marker.mkdir()
        return repo
    return _make


@pytest.fixture
def gitfindr_home(tmp_path, monkeypatch):
    """Redirect the data directory to a temporary location."""
    home = tmp_path / "gitfindr-home"
    monkeypatch.setenv("GITFINDR_HOME", str(home))
    monkeypatch.delenv("NO_COLOR", raising=False)
    return home
