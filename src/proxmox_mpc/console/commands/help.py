"""Help command - show available commands."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from proxmox_mpc.console.registry import CommandRegistry
    from proxmox_mpc.console.session import ConsoleSession

RESOURCE_HELP = [
    ("create vm --name <name>", "Generate VM configuration"),
    ("create container --name <name>", "Generate container configuration"),
    ("delete vm <id>", "Remove VM configuration"),
    ("list vms", "Show VMs"),
    ("describe vm <id>", "Show VM details"),
]

SHORTCUT_HELP = [
    ("help, exit, quit", "Alternative commands"),
    ("Ctrl+C", "Exit console"),
    ("Up/Down arrows", "Command history"),
]


def render_help(registry: "CommandRegistry", session: "ConsoleSession") -> str:
    """Build the general help text.

    Slash commands are listed in registration order.
    """
    lines = ["", "📚 Available Commands:", "", "🔧 Slash Commands:"]
    for entry in registry.entries():
        lines.append(f"  {entry.usage:<32} {entry.description}")
    lines.append("")

    lines.append("🏗️  Resource Commands (Future):")
    for usage, description in RESOURCE_HELP:
        lines.append(f"  {usage:<32} {description}")
    lines.append("")

    lines.append("⌨️  Shortcuts:")
    for keys, description in SHORTCUT_HELP:
        lines.append(f"  {keys:<32} {description}")
    lines.append("")

    if session.workspace is not None:
        ws = session.workspace
        lines.append("📁 Current Workspace:")
        lines.append(f"  Project: {ws.name}")
        lines.append(f"  Server: {ws.config.host}:{ws.config.port}")
        lines.append(f"  Node: {ws.config.node}")
        lines.append("")

    lines.append("💡 Use /help <command> for details on one command")
    return "\n".join(lines)


def render_command_help(registry: "CommandRegistry", name: str) -> str:
    """Build the help text for one command."""
    name = name.lstrip("/")
    entry = registry.get(name)
    if entry is None:
        return f"❌ No help for unknown command: /{name}"
    text = f"\n/{entry.name} - {entry.description}\n\nUsage: {entry.usage}"
    doc = (entry.handler.__doc__ or "").strip()
    if doc:
        text += "\n\n" + doc
    return text


def register(registry: "CommandRegistry") -> None:
    @registry.command("help", "Show this help message", usage="/help [command]")
    def cmd_help(args: list[str], session: "ConsoleSession"):
        """Without arguments lists every command; /help <command> shows its usage."""
        if args:
            print(render_command_help(registry, args[0]))
        else:
            print(render_help(registry, session))
        print()
