"""
Command loader - discovers and loads user slash commands.

User commands live in ~/.proxmox-mpc/commands/, one subdirectory per
command with an __init__.py that exposes ``register(registry)``:

    # ~/.proxmox-mpc/commands/nodes/__init__.py
    def register(registry):
        @registry.command("nodes", "List cluster nodes")
        def cmd_nodes(args, session):
            print("pve1, pve2")

A user command with the same name as a built-in replaces it.
"""

from __future__ import annotations

import logging
import sys
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from proxmox_mpc.console.registry import CommandRegistry

logger = logging.getLogger(__name__)

# Default user commands directory
USER_COMMANDS_DIR = Path.home() / ".proxmox-mpc" / "commands"


def discover_commands(commands_dir: Path) -> list[Path]:
    """
    Discover command directories in the given path.

    Args:
        commands_dir: Directory to search

    Returns:
        List of __init__.py paths for valid commands, sorted by directory name.
    """
    if not commands_dir.exists():
        return []

    if not commands_dir.is_dir():
        logger.warning(f"Commands path is not a directory: {commands_dir}")
        return []

    cmd_paths = []
    for subdir in sorted(commands_dir.iterdir()):
        if not subdir.is_dir():
            continue
        # Skip hidden and private directories
        if subdir.name.startswith((".", "_")):
            continue
        init_file = subdir / "__init__.py"
        if init_file.exists():
            cmd_paths.append(init_file)
        else:
            logger.debug(f"Skipping {subdir.name}: no __init__.py")

    return cmd_paths


def load_command(
    cmd_path: Path,
    registry: "CommandRegistry",
    prefix: str = "proxmox_mpc_user_cmd",
) -> tuple[str, bool, str]:
    """
    Load a single command module and let it register with the registry.

    Returns:
        Tuple of (cmd_name, success, error_message)
    """
    cmd_name = cmd_path.parent.name
    module_name = f"{prefix}.{cmd_name}"

    try:
        spec = spec_from_file_location(module_name, cmd_path)
        if spec is None or spec.loader is None:
            return (cmd_name, False, "Could not create module spec")

        module = module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)

        register = getattr(module, "register", None)
        if not callable(register):
            return (cmd_name, False, "No register(registry) function")
        register(registry)

        return (cmd_name, True, "")

    except SyntaxError as e:
        return (cmd_name, False, f"Syntax error: {e}")
    except ImportError as e:
        return (cmd_name, False, f"Import error: {e}")
    except Exception as e:
        return (cmd_name, False, f"Error: {e}")


def load_user_commands(registry: "CommandRegistry", user_dir: Path | None = None) -> int:
    """
    Load all commands from the user directory into registry.

    Failures are logged and skipped.

    Returns:
        Number of successfully loaded commands.
    """
    user_dir = user_dir or USER_COMMANDS_DIR
    total_loaded = 0

    for cmd_path in discover_commands(user_dir):
        cmd_name, success, error = load_command(cmd_path, registry)

        if success:
            total_loaded += 1
            logger.info(f"Loaded command: {cmd_name}")
        else:
            logger.warning(f"Failed to load command '{cmd_name}': {error}")

    return total_loaded
