"""Tests for the execute_* command functions and their success flags."""

import argparse

import pytest

from gitfindr import Config, Registry, RepositoryRecord
from gitfindr.command_add import execute_add
from gitfindr.command_list import execute_list
from gitfindr.command_remove import execute_remove
from gitfindr.command_show import execute_show


def _args(**kwargs):
    defaults = {"path": None, "alias": None, "directory": None, "name": None, "verbose": False}
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


@pytest.fixture
def config(gitfindr_home):
    return Config()


class TestExecuteAdd:

    def test_path_added(self, config, make_repo):
        registry = Registry()
        repo = make_repo("project")
        assert execute_add(config, registry, _args(path=str(repo), alias="p")) is True
        assert registry.get("p") == RepositoryRecord(name="p", path=str(repo))

    def test_not_a_repository(self, config, tmp_path):
        registry = Registry()
        (tmp_path / "plain").mkdir()
        assert execute_add(config, registry, _args(path=str(tmp_path / "plain"))) is False
        assert registry.is_empty()

    def test_alias_taken(self, config, make_repo):
        registry = Registry()
        registry.add(RepositoryRecord(name="p", path="/elsewhere"))
        repo = make_repo("project")
        assert execute_add(config, registry, _args(path=str(repo), alias="p")) is False
        assert registry.get("p").path == "/elsewhere"

    def test_directory_all_added(self, config, make_repo, tmp_path):
        registry = Registry()
        make_repo("root/a")
        make_repo("root/b/c")
        assert execute_add(config, registry, _args(directory=str(tmp_path / "root"))) is True
        assert len(registry) == 2

    def test_directory_with_collision(self, config, make_repo, tmp_path):
        registry = Registry()
        make_repo("root/x/tools")
        make_repo("root/y/tools")
        assert execute_add(config, registry, _args(directory=str(tmp_path / "root"))) is False
        assert len(registry) == 1

    def test_directory_missing(self, config, tmp_path):
        assert execute_add(config, Registry(), _args(directory=str(tmp_path / "nope"))) is False

    def test_neither_path_nor_directory(self, config, capsys):
        assert execute_add(config, Registry(), _args()) is False
        assert capsys.readouterr().err.startswith("Error:")


class TestExecuteRemoveListShow:

    def test_remove(self, config):
        registry = Registry()
        registry.add(RepositoryRecord(name="p", path="/p"))
        assert execute_remove(config, registry, _args(name="p")) is True
        assert registry.is_empty()

    def test_remove_absent(self, config):
        registry = Registry()
        registry.add(RepositoryRecord(name="p", path="/p"))
        assert execute_remove(config, registry, _args(name="ghost")) is False
        assert "p" in registry

    def test_list(self, config, capsys):
        assert execute_list(config, Registry(), _args()) is True
        assert capsys.readouterr().out.strip() == "No repos to show!"

    def test_show(self, config):
        registry = Registry()
        registry.add(RepositoryRecord(name="p", path="/p"))
        assert execute_show(config, registry, _args(name="p")) is True
        assert execute_show(config, registry, _args(name="ghost")) is False
