# pyright: reportExplicitAny=false, reportAny=false
"""Data models for the application specification.

This module defines the pydantic models for the app spec document and its
named collections (registries, environments, libraries), along with the
collection operations that keep each entry's name consistent with its key.

Registry and environment names are not persisted: the map key is the name,
and read accessors return copies with the name filled in. Library names are
persisted for compatibility with existing documents, but are always written
from the key.
"""

from typing import Any, ClassVar, Final, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from appspec.exceptions import (
    EnvironmentExistsError,
    EnvironmentNameInvalidError,
    EnvironmentNotExistsError,
    LibraryExistsError,
    LibraryNameInvalidError,
    RegistryExistsError,
    RegistryNameInvalidError,
)

__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_NAMESPACE",
    "DEFAULT_VERSION",
    "KIND",
    "AppSpec",
    "ContributorSpec",
    "EnvironmentDestinationSpec",
    "EnvironmentSpec",
    "GitVersionSpec",
    "LibraryRefSpec",
    "RegistryRefSpec",
    "RepositorySpec",
    "with_name",
]

# Newest app spec API version this client understands
DEFAULT_API_VERSION: Final = "0.1.0"

# Schema resource type
KIND: Final = "ksonnet.io/app"

# Version given to newly created applications
DEFAULT_VERSION: Final = "0.0.1"

# Namespace targets are deployed to when a destination does not name one
DEFAULT_NAMESPACE: Final = "default"

_MODEL_CONFIG: Final = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, extra="ignore"
)


# =============================================================================
# Value Objects
# =============================================================================


class GitVersionSpec(BaseModel):
    """Git version pin for a registry or library.

    Attributes:
        ref_spec: Git ref (branch, tag) the entry tracks.
        commit_sha: Resolved commit SHA.
    """

    model_config: ClassVar[ConfigDict] = _MODEL_CONFIG

    ref_spec: str = ""
    commit_sha: str = ""


class RepositorySpec(BaseModel):
    """Upstream source repository of the project."""

    model_config: ClassVar[ConfigDict] = _MODEL_CONFIG

    type: str = ""
    uri: str = ""


class ContributorSpec(BaseModel):
    """A project contributor."""

    model_config: ClassVar[ConfigDict] = _MODEL_CONFIG

    name: str = ""
    email: str = ""


class EnvironmentDestinationSpec(BaseModel):
    """Cluster address an environment points to.

    Attributes:
        server: Kubernetes API server address.
        namespace: Namespace targets are deployed to. Callers treat an empty
            value as DEFAULT_NAMESPACE; the model stores it as given.
    """

    model_config: ClassVar[ConfigDict] = _MODEL_CONFIG

    server: str = ""
    namespace: str = ""


# =============================================================================
# Named Entries
# =============================================================================


class RegistryRefSpec(BaseModel):
    """Reference to a registry, a named collection of library parts.

    Attributes:
        name: Registry name. Not serialized; derived from the map key.
        protocol: Registry protocol (e.g. "github").
        uri: Registry location.
        git_version: Resolved Git version, if any.
    """

    model_config: ClassVar[ConfigDict] = _MODEL_CONFIG

    name: str = Field(default="", exclude=True)
    protocol: str = ""
    uri: str = ""
    git_version: GitVersionSpec | None = None


class EnvironmentSpec(BaseModel):
    """A named deployment target.

    Attributes:
        name: Environment name. Not serialized; derived from the map key.
        kubernetes_version: Kubernetes version of the target cluster.
        path: Relative project path holding this environment's metadata.
        destination: Cluster address this environment deploys to.
        targets: Relative component paths deployed to the destination.
    """

    model_config: ClassVar[ConfigDict] = _MODEL_CONFIG

    name: str = Field(default="", exclude=True)
    kubernetes_version: str = Field(default="", alias="k8sVersion")
    path: str = ""
    destination: EnvironmentDestinationSpec | None = None
    targets: list[str] = Field(default_factory=list)

    @field_validator("targets", mode="before")
    @classmethod
    def default_targets(cls, value: Any) -> Any:
        return [] if value is None else value


class LibraryRefSpec(BaseModel):
    """Reference to a library installed from a registry.

    Attributes:
        name: Library name. Persisted, but always written from the map key.
        registry: Name of the registry the library comes from.
        git_version: Resolved Git version, if any.
    """

    model_config: ClassVar[ConfigDict] = _MODEL_CONFIG

    name: str = ""
    registry: str = ""
    git_version: GitVersionSpec | None = None


_NamedSpecT = TypeVar("_NamedSpecT", RegistryRefSpec, EnvironmentSpec, LibraryRefSpec)


def with_name(entry: _NamedSpecT, name: str) -> _NamedSpecT:
    """Return a deep copy of a named entry with its name set to the map key.

    Args:
        entry: Entry as stored in a named collection.
        name: The key the entry is stored under.

    Returns:
        An independent copy carrying the given name.
    """
    return entry.model_copy(update={"name": name}, deep=True)


# =============================================================================
# Document
# =============================================================================


class AppSpec(BaseModel):
    """The application specification document.

    Holds project metadata plus the registries, environments and libraries
    the project uses. The named collections and the contributor list are
    never None; absent or null values load as empty containers.

    Mutating methods act on this instance only. Callers persist changes
    explicitly with write_app_spec() or AppSpecStore.save().
    """

    model_config: ClassVar[ConfigDict] = _MODEL_CONFIG

    api_version: str | None = None
    kind: str = ""
    name: str = ""
    version: str = ""
    description: str = ""
    authors: list[str] = Field(default_factory=list)
    contributors: list[ContributorSpec] = Field(default_factory=list)
    repository: RepositorySpec | None = None
    bugs: str = ""
    keywords: list[str] = Field(default_factory=list)
    registries: dict[str, RegistryRefSpec] = Field(default_factory=dict)
    environments: dict[str, EnvironmentSpec] = Field(default_factory=dict)
    libraries: dict[str, LibraryRefSpec] = Field(default_factory=dict)
    license: str = ""

    @field_validator("authors", "contributors", "keywords", mode="before")
    @classmethod
    def default_lists(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("registries", "environments", "libraries", mode="before")
    @classmethod
    def default_collections(cls, value: Any) -> Any:
        return {} if value is None else value

    @model_validator(mode="after")
    def sync_entry_names(self) -> Self:
        # Map keys are authoritative for entry names
        for collection in (self.registries, self.environments, self.libraries):
            for key, entry in collection.items():
                if entry.name != key:
                    collection[key] = with_name(entry, key)
        return self

    @classmethod
    def new(
        cls,
        name: str,
        *,
        registries: dict[str, RegistryRefSpec] | None = None,
        environments: dict[str, EnvironmentSpec] | None = None,
    ) -> Self:
        """Create a specification for a newly initialized application.

        Args:
            name: Application name.
            registries: Initial registries, keyed by name. Stored as copies.
            environments: Initial environments, keyed by name. Stored as copies.

        Returns:
            A document at the current API version with empty collections
            apart from the ones given.
        """
        return cls(
            api_version=DEFAULT_API_VERSION,
            kind=KIND,
            name=name,
            version=DEFAULT_VERSION,
            registries={
                key: with_name(entry, key) for key, entry in (registries or {}).items()
            },
            environments={
                key: with_name(entry, key)
                for key, entry in (environments or {}).items()
            },
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the on-disk mapping with camelCase keys.

        Empty top-level fields and empty environment targets are omitted.
        Library names are written from their keys.
        """
        data = self.model_dump(by_alias=True, mode="json")
        data["libraries"] = {
            key: {**entry, "name": key} for key, entry in data["libraries"].items()
        }
        for environment in data["environments"].values():
            if not environment["targets"]:
                del environment["targets"]
        return {
            key: value for key, value in data.items() if value not in (None, "", [], {})
        }

    # -------------------------------------------------------------------------
    # Registries
    # -------------------------------------------------------------------------

    def get_registry_ref(self, name: str) -> RegistryRefSpec | None:
        """Return a copy of the named registry, or None if it is not present."""
        registry = self.registries.get(name)
        if registry is None:
            return None
        return with_name(registry, name)

    def add_registry_ref(self, registry: RegistryRefSpec) -> None:
        """Add a registry under its name.

        Raises:
            RegistryNameInvalidError: If the registry has no name.
            RegistryExistsError: If a registry with the name already exists.
        """
        if not registry.name:
            msg = "Registry name is invalid"
            raise RegistryNameInvalidError(msg)

        if registry.name in self.registries:
            msg = f"Registry with name {registry.name!r} already exists"
            raise RegistryExistsError(msg, name=registry.name)

        self.registries[registry.name] = registry.model_copy(deep=True)

    def delete_registry_ref(self, name: str) -> None:
        """Remove the named registry. Removing a missing registry is a no-op."""
        _ = self.registries.pop(name, None)

    # -------------------------------------------------------------------------
    # Environments
    # -------------------------------------------------------------------------

    def get_environment_specs(self) -> dict[str, EnvironmentSpec]:
        """Return copies of all environments, keyed and named by their keys."""
        return {key: with_name(env, key) for key, env in self.environments.items()}

    def get_environment_spec(self, name: str) -> EnvironmentSpec | None:
        """Return a copy of the named environment, or None if it is not present."""
        environment = self.environments.get(name)
        if environment is None:
            return None
        return with_name(environment, name)

    def add_environment_spec(self, environment: EnvironmentSpec) -> None:
        """Register an environment under its name.

        Raises:
            EnvironmentNameInvalidError: If the environment has no name.
            EnvironmentExistsError: If an environment with the name already
                exists.
        """
        if not environment.name:
            msg = "Environment name is invalid"
            raise EnvironmentNameInvalidError(msg)

        if environment.name in self.environments:
            msg = f"Environment with name {environment.name!r} already exists"
            raise EnvironmentExistsError(msg, name=environment.name)

        self.environments[environment.name] = environment.model_copy(deep=True)

    def delete_environment_spec(self, name: str) -> None:
        """Remove the named environment. Removing a missing one is a no-op."""
        _ = self.environments.pop(name, None)

    def update_environment_spec(self, name: str, environment: EnvironmentSpec) -> None:
        """Replace the named environment, renaming it if the new name differs.

        Args:
            name: Current name of the environment.
            environment: Replacement environment; its name becomes the key.

        Raises:
            EnvironmentNameInvalidError: If the replacement has no name.
            EnvironmentNotExistsError: If no environment is named `name`.
            EnvironmentExistsError: If renaming onto another existing
                environment.
        """
        if not environment.name:
            msg = "Environment name is invalid"
            raise EnvironmentNameInvalidError(msg)

        if name not in self.environments:
            msg = f"Environment with name {name!r} does not exist"
            raise EnvironmentNotExistsError(msg, name=name)

        if environment.name != name:
            if environment.name in self.environments:
                msg = f"Environment with name {environment.name!r} already exists"
                raise EnvironmentExistsError(msg, name=environment.name)
            self.delete_environment_spec(name)

        self.environments[environment.name] = environment.model_copy(deep=True)

    # -------------------------------------------------------------------------
    # Libraries
    # -------------------------------------------------------------------------

    def get_library_ref(self, name: str) -> LibraryRefSpec | None:
        """Return a copy of the named library, or None if it is not present."""
        library = self.libraries.get(name)
        if library is None:
            return None
        return with_name(library, name)

    def add_library_ref(self, library: LibraryRefSpec) -> None:
        """Add a library under its name.

        Raises:
            LibraryNameInvalidError: If the library has no name.
            LibraryExistsError: If a library with the name already exists.
        """
        if not library.name:
            msg = "Library name is invalid"
            raise LibraryNameInvalidError(msg)

        if library.name in self.libraries:
            msg = f"Library with name {library.name!r} already exists"
            raise LibraryExistsError(msg, name=library.name)

        self.libraries[library.name] = library.model_copy(deep=True)

    def delete_library_ref(self, name: str) -> None:
        """Remove the named library. Removing a missing library is a no-op."""
        _ = self.libraries.pop(name, None)
