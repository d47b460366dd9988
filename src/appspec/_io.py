# ruff: noqa: TC003  # Path needed at runtime for Protocol method bodies
"""Reading and writing the app spec file.

The app spec lives at `<app root>/app.yaml`. Bytes are read and written
through a ByteStore so callers can substitute an in-memory store in tests.
LocalByteStore writes atomically to prevent partially written documents.
"""

import tempfile
from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from structlog.typing import FilteringBoundLogger

from appspec._codec import decode, encode
from appspec._models import AppSpec
from appspec.exceptions import AppSpecIOError, AppSpecNotFoundError

__all__ = [
    "APP_YAML_NAME",
    "DEFAULT_FILE_PERMISSIONS",
    "ByteStore",
    "LocalByteStore",
    "read_app_spec",
    "spec_path",
    "write_app_spec",
]

APP_YAML_NAME: Final = "app.yaml"

DEFAULT_FILE_PERMISSIONS: Final = 0o644


@runtime_checkable
class ByteStore(Protocol):
    """Protocol for the storage the app spec is read from and written to."""

    def read_bytes(self, path: Path) -> bytes:
        """Return the full contents of a file.

        Raises:
            FileNotFoundError: If the file does not exist.
            OSError: If the file cannot be read.
        """
        ...

    def write_bytes(self, path: Path, data: bytes, mode: int) -> None:
        """Replace the contents of a file, creating it with `mode` if needed.

        Raises:
            OSError: If the file cannot be written.
        """
        ...


class LocalByteStore:
    """ByteStore backed by the local filesystem."""

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def write_bytes(self, path: Path, data: bytes, mode: int) -> None:
        """Write to a temporary file in the same directory, then rename.

        The target is either fully written or left untouched.
        """
        _ = path.parent.mkdir(parents=True, exist_ok=True)

        temp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="wb",
                dir=path.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                _ = f.write(data)
                temp_path = Path(f.name)

            temp_path.chmod(mode)
            # Path.replace() is atomic on both POSIX and Windows
            _ = temp_path.replace(path)
        except OSError:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise


def spec_path(app_root: Path, file_name: str = APP_YAML_NAME) -> Path:
    """Return the path of the app spec file for an application root."""
    return app_root / file_name


def read_app_spec(
    app_root: Path,
    *,
    store: ByteStore | None = None,
    file_name: str = APP_YAML_NAME,
    logger: FilteringBoundLogger | None = None,
) -> AppSpec:
    """Read and validate the app spec of an application.

    Args:
        app_root: Application root directory.
        store: Byte store to read from. Defaults to the local filesystem.
        file_name: Name of the app spec file within the root.
        logger: Optional logger for diagnostics.

    Returns:
        The decoded document, with all collections present.

    Raises:
        AppSpecNotFoundError: If the app spec file does not exist.
        AppSpecIOError: If the file cannot be read.
        DecodeError: If the content cannot be decoded.
        UnsupportedVersionError: If the API version is unset or too new.
        MalformedVersionError: If the API version cannot be parsed.
    """
    path = spec_path(app_root, file_name)
    byte_store = store if store is not None else LocalByteStore()

    try:
        data = byte_store.read_bytes(path)
    except FileNotFoundError as e:
        msg = f"App spec not found: {path}"
        raise AppSpecNotFoundError(msg, path=path, operation="read", cause=e) from e
    except OSError as e:
        msg = f"Failed to read app spec: {e}"
        raise AppSpecIOError(msg, path=path, operation="read", cause=e) from e

    spec = decode(data)

    if logger is not None:
        logger.debug(
            "app_spec_read",
            path=str(path),
            api_version=spec.api_version,
            environments=len(spec.environments),
            registries=len(spec.registries),
            libraries=len(spec.libraries),
        )

    return spec


def write_app_spec(
    app_root: Path,
    spec: AppSpec,
    *,
    store: ByteStore | None = None,
    file_name: str = APP_YAML_NAME,
    mode: int = DEFAULT_FILE_PERMISSIONS,
    logger: FilteringBoundLogger | None = None,
) -> None:
    """Write the app spec of an application.

    Args:
        app_root: Application root directory.
        spec: The document to write.
        store: Byte store to write to. Defaults to the local filesystem.
        file_name: Name of the app spec file within the root.
        mode: Permission bits for the written file.
        logger: Optional logger for diagnostics.

    Raises:
        AppSpecIOError: If the file cannot be written.
    """
    path = spec_path(app_root, file_name)
    byte_store = store if store is not None else LocalByteStore()
    data = encode(spec)

    try:
        byte_store.write_bytes(path, data, mode)
    except OSError as e:
        msg = f"Failed to write app spec: {e}"
        raise AppSpecIOError(msg, path=path, operation="write", cause=e) from e

    if logger is not None:
        logger.debug("app_spec_written", path=str(path), size=len(data))
