"""
CLI module for the proxmox_mpc package.

Provides the ``proxmox-mpc`` command that starts the interactive console.
"""

from proxmox_mpc.cli.console import main

__all__ = ["main"]
