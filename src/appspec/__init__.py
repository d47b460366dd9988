"""appspec: application specification model for project tooling.

This package reads, validates and writes the `app.yaml` application
specification, and provides consistency-preserving operations over its
registries, environments and libraries.

Example:
    >>> from appspec import AppSpecStore, EnvironmentSpec
    >>> store = AppSpecStore("/path/to/app")
    >>> spec = store.load()
    >>> spec.add_environment_spec(EnvironmentSpec(name="dev", path="environments/dev"))
    >>> store.save(spec)
"""

from appspec._codec import decode, encode
from appspec._fake import MemoryByteStore
from appspec._io import (
    APP_YAML_NAME,
    DEFAULT_FILE_PERMISSIONS,
    ByteStore,
    LocalByteStore,
    read_app_spec,
    spec_path,
    write_app_spec,
)
from appspec._models import (
    DEFAULT_API_VERSION,
    DEFAULT_NAMESPACE,
    DEFAULT_VERSION,
    KIND,
    AppSpec,
    ContributorSpec,
    EnvironmentDestinationSpec,
    EnvironmentSpec,
    GitVersionSpec,
    LibraryRefSpec,
    RegistryRefSpec,
    RepositorySpec,
    with_name,
)
from appspec._store import AppSpecStore
from appspec._validation import parse_api_version, validate_api_version
from appspec._version import SemanticVersion, compare_versions, parse_version
from appspec.exceptions import (
    AppSpecError,
    AppSpecExistsError,
    AppSpecIOError,
    AppSpecNotFoundError,
    DecodeError,
    EnvironmentExistsError,
    EnvironmentNameInvalidError,
    EnvironmentNotExistsError,
    LibraryExistsError,
    LibraryNameInvalidError,
    MalformedVersionError,
    RegistryExistsError,
    RegistryNameInvalidError,
    UnsupportedVersionError,
)

__all__ = [
    "APP_YAML_NAME",
    "DEFAULT_API_VERSION",
    "DEFAULT_FILE_PERMISSIONS",
    "DEFAULT_NAMESPACE",
    "DEFAULT_VERSION",
    "KIND",
    "AppSpec",
    "AppSpecError",
    "AppSpecExistsError",
    "AppSpecIOError",
    "AppSpecNotFoundError",
    "AppSpecStore",
    "ByteStore",
    "ContributorSpec",
    "DecodeError",
    "EnvironmentDestinationSpec",
    "EnvironmentExistsError",
    "EnvironmentNameInvalidError",
    "EnvironmentNotExistsError",
    "EnvironmentSpec",
    "GitVersionSpec",
    "LibraryExistsError",
    "LibraryNameInvalidError",
    "LibraryRefSpec",
    "LocalByteStore",
    "MalformedVersionError",
    "MemoryByteStore",
    "RegistryExistsError",
    "RegistryNameInvalidError",
    "RegistryRefSpec",
    "RepositorySpec",
    "SemanticVersion",
    "UnsupportedVersionError",
    "compare_versions",
    "decode",
    "encode",
    "parse_api_version",
    "parse_version",
    "read_app_spec",
    "spec_path",
    "validate_api_version",
    "with_name",
    "write_app_spec",
]
