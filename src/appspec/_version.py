"""Semantic version parsing and comparison.

This module implements Semantic Versioning 2.0.0 (https://semver.org/)
parsing and precedence ordering, used to gate app spec compatibility.
"""

import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Final

from appspec.exceptions import MalformedVersionError

__all__ = ["SemanticVersion", "compare_versions", "parse_version"]

# Semantic Versioning 2.0.0: MAJOR.MINOR.PATCH[-prerelease][+build]
_SEMVER_RE: Final = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)


def _identifier_key(identifier: str) -> tuple[int, int, str]:
    # Numeric identifiers always have lower precedence than alphanumeric ones
    if identifier.isdigit():
        return (0, int(identifier), "")
    return (1, 0, identifier)


@total_ordering
@dataclass(frozen=True, slots=True)
class SemanticVersion:
    """A parsed semantic version.

    Equality and ordering follow SemVer precedence: build metadata is
    carried but ignored when comparing.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prerelease: Dot-separated pre-release identifiers.
        build: Dot-separated build metadata identifiers.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = field(default=(), compare=False)

    def _precedence(self) -> tuple[int, int, int, tuple[object, ...]]:
        # A release outranks any of its pre-releases
        if not self.prerelease:
            return (self.major, self.minor, self.patch, (1,))
        identifiers = tuple(_identifier_key(part) for part in self.prerelease)
        return (self.major, self.minor, self.patch, (0, identifiers))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


def parse_version(text: str) -> SemanticVersion:
    """Parse a semantic version string.

    Args:
        text: Version string such as "0.1.0" or "1.2.3-alpha.1+build.5".

    Returns:
        The parsed SemanticVersion.

    Raises:
        MalformedVersionError: If the string is not a valid semantic version.
    """
    match = _SEMVER_RE.fullmatch(text)
    if match is None:
        msg = f"Invalid semantic version: {text!r}"
        raise MalformedVersionError(msg, version=text)

    major, minor, patch, prerelease, build = match.groups()
    return SemanticVersion(
        major=int(major),
        minor=int(minor),
        patch=int(patch),
        prerelease=tuple(prerelease.split(".")) if prerelease else (),
        build=tuple(build.split(".")) if build else (),
    )


def compare_versions(a: str, b: str) -> int:
    """Compare two semantic version strings.

    Args:
        a: First version string.
        b: Second version string.

    Returns:
        -1 if a < b, 0 if they have equal precedence, 1 if a > b.

    Raises:
        MalformedVersionError: If either string is not a valid semantic version.
    """
    left = parse_version(a)
    right = parse_version(b)
    if left < right:
        return -1
    if left > right:
        return 1
    return 0
