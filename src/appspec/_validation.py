"""API version gate for app spec documents.

Documents declaring an API version newer than DEFAULT_API_VERSION are
rejected; equal or older versions are accepted. There is no migration.
"""

from typing import Final

from appspec._models import DEFAULT_API_VERSION
from appspec._version import SemanticVersion, parse_version
from appspec.exceptions import MalformedVersionError, UnsupportedVersionError

__all__ = ["parse_api_version", "validate_api_version"]

# Placeholder written by older tooling for an API version that was never set
_LEGACY_UNSET_VERSION: Final = "0.0.0"


def parse_api_version(api_version: str | None) -> SemanticVersion | None:
    """Parse a document's API version.

    Args:
        api_version: The raw `apiVersion` value.

    Returns:
        The parsed version, or None if the version is unset.

    Raises:
        MalformedVersionError: If the value is set but not a semantic version.
    """
    if not api_version or api_version == _LEGACY_UNSET_VERSION:
        return None

    try:
        return parse_version(api_version)
    except MalformedVersionError as e:
        msg = f"Failed to parse version in app spec: {e}"
        raise MalformedVersionError(msg, version=api_version, cause=e) from e


def validate_api_version(api_version: str | None) -> SemanticVersion:
    """Check that a document's API version is supported by this client.

    Args:
        api_version: The raw `apiVersion` value.

    Returns:
        The parsed, supported version.

    Raises:
        UnsupportedVersionError: If the version is unset or newer than
            DEFAULT_API_VERSION.
        MalformedVersionError: If the version cannot be parsed.
    """
    version = parse_api_version(api_version)
    if version is None:
        msg = "App spec does not declare a valid apiVersion"
        raise UnsupportedVersionError(
            msg, version=api_version, supported=DEFAULT_API_VERSION
        )

    if parse_version(DEFAULT_API_VERSION) < version:
        msg = (
            f"Current app uses unsupported spec version {api_version!r} "
            f"(this client only supports {DEFAULT_API_VERSION})"
        )
        raise UnsupportedVersionError(
            msg, version=api_version, supported=DEFAULT_API_VERSION
        )

    return version
