"""App spec store bound to an application root.

This module provides the AppSpecStore class, which loads and saves the app
spec of one application using the configured file name, permissions and
logger.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Final

from appspec._io import LocalByteStore, read_app_spec, spec_path, write_app_spec
from appspec._models import AppSpec
from appspec.config import Config
from appspec.exceptions import AppSpecError, AppSpecExistsError, AppSpecIOError
from appspec.utils import create_logger_from_config

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from appspec._io import ByteStore

__all__ = ["AppSpecStore"]


class AppSpecStore:
    """Loads and saves the app spec of a single application.

    Mutations are made on the AppSpec returned by load() and only reach
    storage when passed to save().

    Attributes:
        _app_root: Application root directory.
        _config: Configuration providing file name, mode and logging.
        _store: Byte store the document is read from and written to.
        _logger: Logger for diagnostics.
    """

    __slots__: Final = ("_app_root", "_config", "_logger", "_store")

    _app_root: Path
    _config: Config
    _store: "ByteStore"
    _logger: "FilteringBoundLogger"

    def __init__(
        self,
        app_root: Path | str,
        *,
        config: Config | None = None,
        store: "ByteStore | None" = None,
        logger: "FilteringBoundLogger | None" = None,
    ) -> None:
        """Initialize the store.

        Args:
            app_root: Application root directory.
            config: Configuration. If None, loaded from the application root
                and the environment.
            store: Byte store. Defaults to the local filesystem.
            logger: Logger. If None, created from the logging configuration.
        """
        self._app_root = Path(app_root)
        self._config = config if config is not None else Config.load(self._app_root)
        self._store = store if store is not None else LocalByteStore()
        self._logger = (
            logger
            if logger is not None
            else create_logger_from_config(self._config.logging)
        ).bind(app_root=str(self._app_root))

    @property
    def app_root(self) -> Path:
        """Application root directory."""
        return self._app_root

    @property
    def path(self) -> Path:
        """Path to the app spec file."""
        return spec_path(self._app_root, self._config.storage.file_name)

    def exists(self) -> bool:
        """Return whether the app spec file exists.

        Raises:
            AppSpecIOError: If the path exists but cannot be read.
        """
        path = self.path
        try:
            _ = self._store.read_bytes(path)
        except FileNotFoundError:
            return False
        except OSError as e:
            msg = f"Failed to read app spec: {e}"
            raise AppSpecIOError(msg, path=path, operation="read", cause=e) from e
        return True

    def load(self) -> AppSpec:
        """Read and validate the app spec.

        Raises:
            AppSpecNotFoundError: If the app spec file does not exist.
            AppSpecIOError: If the file cannot be read.
            DecodeError: If the content cannot be decoded.
            UnsupportedVersionError: If the API version is unset or too new.
            MalformedVersionError: If the API version cannot be parsed.
        """
        try:
            return read_app_spec(
                self._app_root,
                store=self._store,
                file_name=self._config.storage.file_name,
                logger=self._logger,
            )
        except AppSpecError as e:
            self._logger.warning(
                "app_spec_load_failed",
                path=str(self.path),
                error=type(e).__name__,
                message=str(e),
            )
            raise

    def save(self, spec: AppSpec) -> None:
        """Write the app spec.

        Raises:
            AppSpecIOError: If the file cannot be written.
        """
        write_app_spec(
            self._app_root,
            spec,
            store=self._store,
            file_name=self._config.storage.file_name,
            mode=self._config.storage.file_mode,
            logger=self._logger,
        )
        self._logger.info("app_spec_saved", path=str(self.path))

    def create(self, name: str) -> AppSpec:
        """Create and save the app spec for a new application.

        Args:
            name: Application name.

        Returns:
            The new document.

        Raises:
            AppSpecExistsError: If an app spec already exists.
            AppSpecIOError: If the path cannot be read or the file cannot be
                written.
        """
        if self.exists():
            msg = f"App spec already exists: {self.path}"
            raise AppSpecExistsError(msg, path=self.path)

        spec = AppSpec.new(name)
        self.save(spec)
        return spec
