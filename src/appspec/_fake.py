# ruff: noqa: TC003  # Path needed at runtime for dataclass fields
"""In-memory byte store for testing.

This module provides a MemoryByteStore class that implements ByteStore
without touching the filesystem.
"""

from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["MemoryByteStore"]


@dataclass(slots=True)
class MemoryByteStore:
    """In-memory ByteStore.

    Files are kept in a dict keyed by path, along with the permission bits
    they were last written with. Tests can seed `files` directly or set
    `fail_writes` to simulate an unwritable store.

    Example:
        >>> store = MemoryByteStore()
        >>> store.write_bytes(Path("/app/app.yaml"), b"kind: x\\n", 0o644)
        >>> store.read_bytes(Path("/app/app.yaml"))
        b'kind: x\\n'
    """

    files: dict[Path, bytes] = field(default_factory=dict)
    modes: dict[Path, int] = field(default_factory=dict)
    fail_writes: bool = False

    def read_bytes(self, path: Path) -> bytes:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    def write_bytes(self, path: Path, data: bytes, mode: int) -> None:
        if self.fail_writes:
            msg = f"Read-only store: {path}"
            raise PermissionError(msg)
        self.files[path] = data
        self.modes[path] = mode
