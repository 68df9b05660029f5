"""
Project workspace detection and creation.

A workspace is a directory holding a ``.proxmox/config.yml`` file that ties
the directory to one Proxmox server and node.
"""

from proxmox_mpc.workspace.models import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    ProjectWorkspace,
    WorkspaceConfig,
    detect_workspace,
)

__all__ = [
    "CONFIG_DIR_NAME",
    "CONFIG_FILE_NAME",
    "ProjectWorkspace",
    "WorkspaceConfig",
    "detect_workspace",
]
