"""
Shared fixtures for console tests.
"""

import pytest

from proxmox_mpc.config import Config
from proxmox_mpc.console import CommandRegistry, ConsoleSession, InteractiveConsole
from proxmox_mpc.workspace import ProjectWorkspace, WorkspaceConfig


class ScriptedReader:
    """Reader that replays a fixed list of lines.

    Exception instances in the list are raised instead of returned; EOFError
    is raised once the script is exhausted.
    """

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def read(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        item = self.lines.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.fixture
def test_config():
    """Config that never touches ~/.proxmox-mpc/commands."""
    return Config(load_user_commands=False)


@pytest.fixture
def make_console(tmp_path, test_config):
    """Factory for consoles running in tmp_path with scripted input."""
    def factory(lines=(), **kwargs):
        kwargs.setdefault("config", test_config)
        kwargs.setdefault("cwd", tmp_path)
        return InteractiveConsole(reader=ScriptedReader(lines), **kwargs)
    return factory


@pytest.fixture
def session(tmp_path):
    return ConsoleSession(cwd=tmp_path)


@pytest.fixture
def registry():
    return CommandRegistry()


@pytest.fixture
def workspace_config():
    return WorkspaceConfig(host="pve.example.com", node="pve", token_id="automation")


@pytest.fixture
def workspace(tmp_path, workspace_config):
    """A workspace created on disk in tmp_path/lab."""
    root = tmp_path / "lab"
    root.mkdir()
    return ProjectWorkspace.create(root, workspace_config)
