"""
Console session state.

One ConsoleSession exists per console run. It is passed by reference to
every command handler.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Optional

from pydantic import BaseModel, Field, PrivateAttr

from proxmox_mpc.core.exceptions import WorkspaceAlreadyAttachedError
from proxmox_mpc.workspace import ProjectWorkspace

WorkspaceDetector = Callable[[Path], Optional[ProjectWorkspace]]


class ConsoleSession(BaseModel):
    """Mutable record of one console run."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    history: list[str] = Field(default_factory=list)
    start_time: datetime = Field(default_factory=datetime.now)
    cwd: Path = Field(default_factory=Path.cwd)

    _workspace: Optional[ProjectWorkspace] = PrivateAttr(default=None)

    @property
    def workspace(self) -> Optional[ProjectWorkspace]:
        """Detected workspace, if any. Set with attach_workspace()."""
        return self._workspace

    def record(self, line: str) -> None:
        """Append an input line to history."""
        self.history.append(line)

    def attach_workspace(self, workspace: ProjectWorkspace) -> None:
        """Attach a detected workspace.

        Raises:
            WorkspaceAlreadyAttachedError: a workspace is already attached;
                use redetect() to replace it.
        """
        if self._workspace is not None:
            raise WorkspaceAlreadyAttachedError(
                f"Session already attached to workspace '{self._workspace.name}'"
            )
        self._workspace = workspace

    def redetect(self, detector: WorkspaceDetector, path: Path) -> Optional[ProjectWorkspace]:
        """Run detection again and replace the attached workspace.

        The attached workspace is left unchanged when nothing is detected.
        """
        workspace = detector(path)
        if workspace is not None:
            self._workspace = workspace
        return workspace

    def elapsed(self) -> timedelta:
        return datetime.now() - self.start_time

    def elapsed_seconds(self) -> int:
        """Elapsed session time in whole seconds (rounded)."""
        return round(self.elapsed().total_seconds())
