"""
Resource commands (create/delete/list/describe).

The console forwards these lines untouched to a ResourceCommandHandler.
"""

from __future__ import annotations

from typing import Protocol


class ResourceCommandHandler(Protocol):
    """Handles one raw resource-command line."""

    def handle(self, line: str) -> None:
        ...


class StubResourceHandler:
    """Placeholder until resource commands generate configuration."""

    def handle(self, line: str) -> None:
        print(f"🚧 Resource commands not yet implemented: {line}")
        print("   This will generate Terraform/Ansible configurations")
