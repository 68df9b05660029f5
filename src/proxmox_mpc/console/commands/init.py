"""Init command - create a project workspace in the working directory."""
from __future__ import annotations

import os
from typing import TYPE_CHECKING

from pydantic import ValidationError

from proxmox_mpc.console.commands.base import CommandArgumentParser
from proxmox_mpc.core.exceptions import CommandUsageError
from proxmox_mpc.workspace import ProjectWorkspace, WorkspaceConfig, detect_workspace

if TYPE_CHECKING:
    from proxmox_mpc.console.registry import CommandRegistry
    from proxmox_mpc.console.session import ConsoleSession


def _build_parser() -> CommandArgumentParser:
    parser = CommandArgumentParser("/init")
    parser.add_argument("--host", default=os.environ.get("PROXMOX_HOST"))
    parser.add_argument("--port", type=int, default=int(os.environ.get("PROXMOX_PORT", "8006")))
    parser.add_argument("--username", default=os.environ.get("PROXMOX_USERNAME", "root@pam"))
    parser.add_argument("--token-id", default=os.environ.get("PROXMOX_TOKEN_ID"))
    parser.add_argument("--node", default=os.environ.get("PROXMOX_NODE"))
    parser.add_argument("--name", default=None)
    parser.add_argument("--insecure", action="store_true", help="Skip TLS verification")
    return parser


def _first_error(error: ValidationError) -> str:
    err = error.errors()[0]
    field = ".".join(str(p) for p in err.get("loc", ())) or "config"
    return f"{field}: {err.get('msg', 'invalid value')}"


def cmd_init(args: list[str], session: "ConsoleSession"):
    """Create .proxmox/config.yml and the project directories.

    Options default to the PROXMOX_HOST, PROXMOX_PORT, PROXMOX_USERNAME,
    PROXMOX_TOKEN_ID and PROXMOX_NODE environment variables. The token
    secret is only read from PROXMOX_TOKEN_SECRET.

    Example:
        /init --host 192.168.1.100 --node pve --token-id automation
    """
    opts = _build_parser().parse_args(args)

    existing = session.workspace or detect_workspace(session.cwd)
    if existing is not None:
        print("❌ Already in a Proxmox workspace!")
        print(f"   Project: {existing.name}")
        print(f"   Config: {existing.config_path}")
        print("\n💡 Navigate to a different directory to create a new workspace\n")
        return

    if not opts.host or not opts.node:
        raise CommandUsageError(
            "/init needs --host and --node (or PROXMOX_HOST and PROXMOX_NODE)"
        )

    print("🏗️  Initializing new Proxmox project workspace...\n")
    try:
        config = WorkspaceConfig(
            host=opts.host,
            port=opts.port,
            username=opts.username,
            token_id=opts.token_id,
            token_secret=os.environ.get("PROXMOX_TOKEN_SECRET"),
            node=opts.node,
            name=opts.name,
            reject_unauthorized=not opts.insecure,
        )
    except ValidationError as e:
        raise CommandUsageError(f"Invalid workspace settings ({_first_error(e)})") from e

    ProjectWorkspace.create(session.cwd, config)
    workspace = session.redetect(detect_workspace, session.cwd)
    if workspace is None:
        raise RuntimeError(f"Workspace created but not detected in {session.cwd}")

    print("✅ Project workspace initialized successfully!")
    print(f"   📁 Project: {workspace.name}")
    print(f"   ⚙️  Config: {workspace.config_path}")
    print("\n🎯 Next steps:")
    print("   • Use /status to check the workspace")
    print("   • Use /sync to import existing infrastructure\n")


def register(registry: "CommandRegistry") -> None:
    registry.register(
        "init",
        cmd_init,
        "Initialize new project workspace",
        usage="/init --host <host> --node <node>",
    )
