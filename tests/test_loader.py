#!/usr/bin/env python3
"""
Tests for loading user slash commands.
"""

import textwrap

import pytest

from proxmox_mpc.console import CommandRegistry
from proxmox_mpc.console.commands import register_builtins
from proxmox_mpc.console.loader import discover_commands, load_command, load_user_commands


def make_command(commands_dir, name, source):
    cmd_dir = commands_dir / name
    cmd_dir.mkdir(parents=True)
    (cmd_dir / "__init__.py").write_text(textwrap.dedent(source))
    return cmd_dir / "__init__.py"


NODES_SOURCE = """
    def register(registry):
        @registry.command("nodes", "List cluster nodes")
        def cmd_nodes(args, session):
            print("pve1, pve2")
"""


@pytest.fixture
def commands_dir(tmp_path):
    path = tmp_path / "commands"
    path.mkdir()
    return path


class TestDiscover:
    """Tests for discover_commands()."""

    def test_missing_directory(self, tmp_path):
        assert discover_commands(tmp_path / "nope") == []

    def test_not_a_directory(self, tmp_path):
        path = tmp_path / "file"
        path.write_text("")
        assert discover_commands(path) == []

    def test_finds_packages_sorted(self, commands_dir):
        make_command(commands_dir, "zeta", NODES_SOURCE)
        make_command(commands_dir, "alpha", NODES_SOURCE)
        found = discover_commands(commands_dir)
        assert [p.parent.name for p in found] == ["alpha", "zeta"]

    def test_skips_private_and_plain_dirs(self, commands_dir):
        make_command(commands_dir, "_private", NODES_SOURCE)
        make_command(commands_dir, ".hidden", NODES_SOURCE)
        (commands_dir / "empty").mkdir()
        (commands_dir / "loose.py").write_text("")
        assert discover_commands(commands_dir) == []


class TestLoad:
    """Tests for load_command() and load_user_commands()."""

    def test_load_registers(self, commands_dir, registry, session, capsys):
        path = make_command(commands_dir, "nodes", NODES_SOURCE)
        name, ok, err = load_command(path, registry, prefix="test_loader_ok")

        assert (name, ok, err) == ("nodes", True, "")
        registry.execute("nodes", [], session)
        assert "pve1, pve2" in capsys.readouterr().out

    def test_missing_register(self, commands_dir, registry):
        path = make_command(commands_dir, "broken", "VALUE = 1\n")
        name, ok, err = load_command(path, registry, prefix="test_loader_noreg")
        assert not ok
        assert "register" in err
        assert len(registry) == 0

    def test_syntax_error(self, commands_dir, registry):
        path = make_command(commands_dir, "bad", "def register(:\n")
        _, ok, err = load_command(path, registry, prefix="test_loader_syntax")
        assert not ok
        assert err.startswith("Syntax error")

    def test_register_raises(self, commands_dir, registry):
        path = make_command(commands_dir, "boom", """
            def register(registry):
                raise RuntimeError("no config")
        """)
        _, ok, err = load_command(path, registry, prefix="test_loader_raise")
        assert not ok
        assert "no config" in err

    def test_load_user_commands_counts_successes(self, commands_dir):
        make_command(commands_dir, "nodes", NODES_SOURCE)
        make_command(commands_dir, "broken", "VALUE = 1\n")
        registry = CommandRegistry()
        assert load_user_commands(registry, commands_dir) == 1
        assert registry.has("nodes")

    def test_user_command_overrides_builtin(self, commands_dir, session, capsys):
        """Test a user command replaces a built-in with the same name."""
        make_command(commands_dir, "status", """
            def register(registry):
                registry.register("status", lambda args, session: print("custom status"), "Custom")
        """)
        registry = CommandRegistry()
        register_builtins(registry)
        position = registry.names().index("status")

        load_user_commands(registry, commands_dir)

        registry.execute("status", [], session)
        assert "custom status" in capsys.readouterr().out
        assert registry.names().index("status") == position
