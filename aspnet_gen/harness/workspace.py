"""Isolated per-scenario workspaces."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path

from ..errors import WorkspaceError
from ..utils import ensure_dir

_PREFIX = "aspnet-gen-"


class TempWorkspace:
    """Allocates fresh, empty, uniquely named directories.

    Uniqueness comes from :func:`tempfile.mkdtemp`, which creates the
    directory atomically, so concurrent callers never receive the same path.
    """

    def __init__(self, root: str | Path | None = None, *, keep: bool = False) -> None:
        self.root = Path(root) if root is not None else None
        self.keep = keep

    def create(self, label: str = "") -> Path:
        """Create a workspace and return its absolute path.

        Raises:
            WorkspaceError: If the directory cannot be created (missing or
                read-only root, disk full, ...).
        """
        prefix = f"{_PREFIX}{_safe_label(label)}-" if label else _PREFIX
        try:
            if self.root is not None:
                ensure_dir(self.root)
            path = tempfile.mkdtemp(prefix=prefix, dir=str(self.root) if self.root else None)
        except OSError as exc:
            parent = self.root or tempfile.gettempdir()
            raise WorkspaceError(f"cannot allocate workspace under {parent}: {exc}") from exc
        return Path(path).resolve()

    def cleanup(self, path: str | Path) -> bool:
        """Remove *path* unless workspaces are kept; return ``True`` if removed."""
        if self.keep:
            return False
        shutil.rmtree(path, ignore_errors=True)
        return True


def _safe_label(label: str) -> str:
    return "".join(ch if ch.isalnum() else "-" for ch in label)[:40].strip("-")
