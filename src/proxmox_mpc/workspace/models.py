"""
Workspace data models.

Pydantic models for the workspace configuration file and the detected
workspace descriptor handed to the console session.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from proxmox_mpc import __version__
from proxmox_mpc.core.exceptions import DetectionError

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".proxmox"
CONFIG_FILE_NAME = "config.yml"
DATABASE_FILE_NAME = "state.db"

# Directory skeleton created by ProjectWorkspace.create()
WORKSPACE_DIRECTORIES = [
    ".proxmox",
    ".proxmox/history",
    ".proxmox/cache",
    "terraform",
    "terraform/vms",
    "terraform/containers",
    "terraform/networks",
    "terraform/storage",
    "ansible",
    "ansible/group_vars",
    "ansible/host_vars",
    "ansible/playbooks",
    "ansible/roles",
    "tests",
    "docs",
    "scripts",
]


class WorkspaceConfig(BaseModel):
    """Server connection settings stored in .proxmox/config.yml.

    Keys are written in camelCase (``tokenId``, ``rejectUnauthorized``) to
    stay compatible with existing workspace files.
    """

    model_config = {"populate_by_name": True, "extra": "ignore"}

    host: str = Field(min_length=1)
    port: int = Field(default=8006, ge=1, le=65535)
    username: str = Field(default="root@pam", min_length=1)
    token_id: Optional[str] = Field(default=None, alias="tokenId")
    token_secret: Optional[str] = Field(default=None, alias="tokenSecret")
    node: str = Field(min_length=1)
    reject_unauthorized: bool = Field(default=True, alias="rejectUnauthorized")
    name: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = Field(default=None, pattern=r"^\d+\.\d+\.\d+$")
    created: Optional[str] = None

    @field_validator("host", "username", "node", "name")
    @classmethod
    def _not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("cannot be empty")
        return value.strip() if value is not None else value

    def to_yaml(self) -> str:
        """Serialize to YAML, skipping unset values."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        return yaml.safe_dump(data, sort_keys=True, default_flow_style=False)


class ProjectWorkspace(BaseModel):
    """A detected Proxmox project workspace."""

    model_config = {"frozen": True}

    root_path: Path
    config: WorkspaceConfig

    @property
    def name(self) -> str:
        return self.config.name or self.root_path.name

    @property
    def config_path(self) -> Path:
        return self.root_path / CONFIG_DIR_NAME / CONFIG_FILE_NAME

    @property
    def database_path(self) -> Path:
        return self.root_path / CONFIG_DIR_NAME / DATABASE_FILE_NAME

    @classmethod
    def load(cls, root_path: Path | str) -> "ProjectWorkspace":
        """Load the workspace rooted at root_path.

        Raises:
            DetectionError: config file missing, unreadable or invalid.
        """
        root = Path(root_path).resolve()
        config_path = root / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise DetectionError(f"No workspace config at {config_path}") from e
        except (OSError, yaml.YAMLError) as e:
            raise DetectionError(f"Cannot read {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise DetectionError(f"Invalid workspace config at {config_path}")

        try:
            config = WorkspaceConfig.model_validate(data)
        except ValidationError as e:
            raise DetectionError(f"Invalid workspace config at {config_path}: {e}") from e

        return cls(root_path=root, config=config)

    @classmethod
    def detect(cls, search_path: Path | str) -> Optional["ProjectWorkspace"]:
        """Detect an existing workspace in search_path, None if there is none."""
        try:
            return cls.load(search_path)
        except DetectionError as e:
            logger.debug(f"No workspace detected: {e}")
            return None

    @classmethod
    def create(cls, root_path: Path | str, config: WorkspaceConfig) -> "ProjectWorkspace":
        """Create a new workspace: directory skeleton plus config file."""
        root = Path(root_path).resolve()
        config = config.model_copy(update={
            "name": config.name or root.name,
            "created": config.created or datetime.now().isoformat(),
            "version": config.version or __version__,
        })

        for directory in WORKSPACE_DIRECTORIES:
            (root / directory).mkdir(parents=True, exist_ok=True)

        config_path = root / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        config_path.write_text(config.to_yaml(), encoding="utf-8")
        logger.info(f"Created workspace {config.name} at {root}")

        return cls(root_path=root, config=config)


def detect_workspace(path: Path | str) -> Optional[ProjectWorkspace]:
    """Workspace detector used by the console at startup."""
    return ProjectWorkspace.detect(path)
