"""appspec exceptions."""

from pathlib import Path


class AppSpecError(Exception):
    """Base exception for appspec errors."""


class ConfigError(AppSpecError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


# =============================================================================
# Version Exceptions
# =============================================================================


class MalformedVersionError(AppSpecError, ValueError):
    """Raised when a string is not a valid semantic version.

    Attributes:
        version: The string that failed to parse.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        version: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and version context.

        Args:
            message: Human-readable error message.
            version: The string that failed to parse.
            cause: The underlying exception, if any.
        """
        super().__init__(message)
        self.version: str | None = version
        self.cause: Exception | None = cause


class UnsupportedVersionError(AppSpecError, ValueError):
    """Raised when a document declares an API version this client cannot read.

    Attributes:
        version: The API version declared by the document (None when unset).
        supported: The newest API version this client supports.
    """

    def __init__(
        self,
        message: str,
        *,
        version: str | None = None,
        supported: str | None = None,
    ) -> None:
        """Initialize with error message and version context.

        Args:
            message: Human-readable error message.
            version: The API version declared by the document.
            supported: The newest API version this client supports.
        """
        super().__init__(message)
        self.version: str | None = version
        self.supported: str | None = supported


# =============================================================================
# Document Exceptions
# =============================================================================


class DecodeError(AppSpecError, ValueError):
    """Raised when serialized document content cannot be decoded.

    Attributes:
        line: Line number where the error occurred, when known.
        cause: The underlying exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and decode context.

        Args:
            message: Human-readable error message.
            line: Line number where the error occurred, when known.
            cause: The underlying exception that caused this error.
        """
        super().__init__(message)
        self.line: int | None = line
        self.cause: Exception | None = cause


class AppSpecIOError(AppSpecError):
    """Raised when the app spec file cannot be read or written.

    Attributes:
        path: Path to the file that caused the error.
        operation: The operation that failed ("read", "write").
        cause: The underlying exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        operation: str,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and I/O context.

        Args:
            message: Human-readable error message.
            path: Path to the file that caused the error.
            operation: The operation that failed ("read", "write").
            cause: The underlying exception that caused this error.
        """
        super().__init__(message)
        self.path: Path = path
        self.operation: str = operation
        self.cause: Exception | None = cause


class AppSpecNotFoundError(AppSpecIOError, FileNotFoundError):
    """Raised when no app spec file exists at the expected path."""


class AppSpecExistsError(AppSpecError, FileExistsError):
    """Raised when creating an app spec where one already exists.

    Attributes:
        path: Path to the existing file.
    """

    def __init__(self, message: str, *, path: Path) -> None:
        """Initialize with error message and path context."""
        super().__init__(message)
        self.path: Path = path


# =============================================================================
# Collection Exceptions
# =============================================================================


class NameInvalidError(AppSpecError, ValueError):
    """Base exception for entries inserted without a name."""


class RegistryNameInvalidError(NameInvalidError):
    """Registry name is invalid."""


class EnvironmentNameInvalidError(NameInvalidError):
    """Environment name is invalid."""


class LibraryNameInvalidError(NameInvalidError):
    """Library name is invalid."""


class EntryExistsError(AppSpecError, ValueError):
    """Base exception for inserting an entry under a name already in use.

    Attributes:
        name: The name that already exists.
    """

    def __init__(self, message: str, *, name: str) -> None:
        """Initialize with error message and entry context.

        Args:
            message: Human-readable error message.
            name: The name that already exists.
        """
        super().__init__(message)
        self.name: str = name


class RegistryExistsError(EntryExistsError):
    """Registry with name already exists."""


class EnvironmentExistsError(EntryExistsError):
    """Environment with name already exists."""


class LibraryExistsError(EntryExistsError):
    """Library with name already exists."""


class EnvironmentNotExistsError(AppSpecError, KeyError):
    """Raised when updating an environment that does not exist.

    Attributes:
        name: The environment name that was not found.
    """

    def __init__(self, message: str, *, name: str) -> None:
        """Initialize with error message and environment context."""
        super().__init__(message)
        self.name: str = name

    def __str__(self) -> str:
        # KeyError quotes its argument; report the message as written
        return str(self.args[0]) if self.args else ""
