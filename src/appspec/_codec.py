# pyright: reportAny=false, reportUnknownVariableType=false
"""YAML encoding and decoding of app spec documents.

Decoding runs the API version gate before the document is returned, so a
decoded AppSpec is always one this client supports.
"""

from typing import Any

import yaml
from pydantic import ValidationError

from appspec._models import AppSpec
from appspec._validation import validate_api_version
from appspec.exceptions import DecodeError

__all__ = ["decode", "encode"]


def decode(data: bytes | str) -> AppSpec:
    """Parse a serialized app spec and check its API version.

    Unknown keys are ignored. Missing or null collections decode as empty.

    Args:
        data: UTF-8 YAML content.

    Returns:
        The decoded, validated document.

    Raises:
        DecodeError: If the content is not valid YAML, is not a mapping, or
            does not match the document shape.
        UnsupportedVersionError: If the document's API version is unset or
            newer than this client supports.
        MalformedVersionError: If the document's API version cannot be parsed.
    """
    try:
        raw: Any = yaml.safe_load(data)  # pyright: ignore[reportExplicitAny]
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line = mark.line + 1 if mark is not None else None
        msg = f"Invalid YAML in app spec: {e}"
        raise DecodeError(msg, line=line, cause=e) from e

    # An empty document carries no fields at all
    if raw is None:
        raw = {}

    if not isinstance(raw, dict):
        msg = f"Expected YAML mapping in app spec, got {type(raw).__name__}"
        raise DecodeError(msg)

    try:
        spec = AppSpec.model_validate(raw)
    except ValidationError as e:
        msg = f"App spec does not match the expected shape: {e}"
        raise DecodeError(msg, cause=e) from e

    _ = validate_api_version(spec.api_version)
    return spec


def encode(spec: AppSpec) -> bytes:
    """Serialize an app spec to UTF-8 YAML.

    Keys are sorted and written in block style for readable diffs.

    Args:
        spec: The document to serialize.

    Returns:
        The YAML content as bytes.
    """
    content = yaml.safe_dump(
        spec.to_dict(),
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=True,
    )
    return content.encode("utf-8")
