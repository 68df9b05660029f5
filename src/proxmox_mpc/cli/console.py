#!/usr/bin/env python3
"""
CLI entry point for the interactive console (proxmox-mpc command).
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from pathlib import Path
from typing import Optional, Sequence

from proxmox_mpc import __version__
from proxmox_mpc.config import DEFAULTS, ConfigManager, get_config_manager
from proxmox_mpc.console import InteractiveConsole
from proxmox_mpc.log import close_session_logging, configure_logging, configure_session_logging

logger = logging.getLogger(__name__)


def print_config(cfg_mgr: ConfigManager) -> None:
    """Print current configuration."""
    settings = cfg_mgr.list_settings()

    print(f"Config file: {cfg_mgr.CONFIG_FILE}")

    if settings:
        print("\nCustom settings:")
        for key, value in settings.items():
            print(f"  {key}: {value}")

    print("\nDefaults (used when not set):")
    for key, value in DEFAULTS.items():
        if key not in settings:
            print(f"  {key}: {value!r}")

    print("\nSet with: proxmox-mpc --set-config key=value")
    print()


def _raise_interrupt(signum, frame):
    raise KeyboardInterrupt


def build_parser(cfg_mgr: ConfigManager) -> argparse.ArgumentParser:
    cfg = cfg_mgr.config
    parser = argparse.ArgumentParser(
        prog="proxmox-mpc",
        description="Interactive Proxmox infrastructure console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Config file: {cfg_mgr.CONFIG_FILE}

Examples:
    proxmox-mpc                          # Start console in the current directory
    proxmox-mpc --cwd ~/infra/lab        # Start console for another workspace
    proxmox-mpc --config                 # Show current config
    proxmox-mpc --set-config simple=true # Always use simple line input
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--cwd", type=Path, default=None,
                        help="Directory to detect the workspace in (default: current directory)")
    parser.add_argument("--simple", action="store_true", default=cfg.get("simple"),
                        help="Use simple line input (no prompt_toolkit features)")
    parser.add_argument("--no-user-commands", action="store_true",
                        help="Do not load commands from ~/.proxmox-mpc/commands")
    parser.add_argument("--log-level", default=cfg.get("log_level"),
                        help=f"Console log level (default: {cfg.get('log_level')})")
    parser.add_argument("--log-file", type=Path, default=None,
                        help="Write a debug log of this session to the given file")

    # Config management
    parser.add_argument("--config", action="store_true",
                        help="Show current configuration")
    parser.add_argument("--config-file", type=Path, default=None,
                        help="Use another config file")
    parser.add_argument("--set-config", metavar="KEY=VALUE",
                        help=f"Set a config value. Keys: {', '.join(DEFAULTS)}")
    parser.add_argument("--unset-config", metavar="KEY",
                        help="Unset a config value (reset to default)")
    return parser


def _config_manager_from_argv(argv: Sequence[str]) -> ConfigManager:
    """Pick the config manager before full parsing so defaults come from it."""
    pre = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    pre.add_argument("--config-file", type=Path, default=None)
    known, _ = pre.parse_known_args(argv)
    if known.config_file is not None:
        return ConfigManager(config_file=known.config_file)
    return get_config_manager()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the proxmox-mpc CLI."""
    argv = list(sys.argv[1:] if argv is None else argv)
    cfg_mgr = _config_manager_from_argv(argv)
    args = build_parser(cfg_mgr).parse_args(argv)

    if args.config:
        print_config(cfg_mgr)
        return 0

    if args.set_config:
        try:
            key, value = args.set_config.split("=", 1)
            cfg_mgr.set(key.strip(), value.strip())
            print(f"Set {key.strip()} = {value.strip()}")
            print(f"Saved to {cfg_mgr.CONFIG_FILE}")
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        return 0

    if args.unset_config:
        try:
            cfg_mgr.unset(args.unset_config)
            print(f"Unset {args.unset_config}")
            print(f"Saved to {cfg_mgr.CONFIG_FILE}")
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        return 0

    config = cfg_mgr.config.model_copy(update={
        "simple": args.simple,
        "log_level": args.log_level,
        "load_user_commands": (not args.no_user_commands) and cfg_mgr.config.get("load_user_commands"),
    })

    configure_logging(config.get("log_level"))

    console = InteractiveConsole(config=config, cwd=args.cwd)

    if args.log_file is not None or config.get("file_logging"):
        log_path = configure_session_logging(console.session.id, log_path=args.log_file)
        logger.debug(f"Session log: {log_path}")

    signal.signal(signal.SIGTERM, _raise_interrupt)
    try:
        return console.start()
    finally:
        close_session_logging()


if __name__ == "__main__":
    sys.exit(main())
