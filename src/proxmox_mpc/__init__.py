"""
proxmox-mpc - interactive infrastructure console for Proxmox VE.

The console engine lives in ``proxmox_mpc.console``; the ``proxmox-mpc``
command is provided by ``proxmox_mpc.cli``.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
