"""Local checks run before a client is built."""

from __future__ import annotations

import re
from enum import IntEnum

from .errors import InvalidKeyFormatError, InvalidVersionError

KEY_PATTERN = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}")


class ApiVersion(IntEnum):
    """Holiday API versions this client can talk to."""

    V1 = 1


SUPPORTED_VERSIONS: frozenset[int] = frozenset(ApiVersion)
DEFAULT_VERSION = ApiVersion.V1


def validate_key(key: object) -> None:
    """Raise InvalidKeyFormatError unless ``key`` is a lowercase UUID string.

    This is a shape check only; a revoked key still passes.
    """
    if not isinstance(key, str) or KEY_PATTERN.fullmatch(key) is None:
        raise InvalidKeyFormatError(key)


def validate_version(version: object) -> None:
    """Raise InvalidVersionError unless ``version`` is a supported API version."""
    if isinstance(version, bool) or not isinstance(version, int):
        raise InvalidVersionError(version, SUPPORTED_VERSIONS)
    if version not in SUPPORTED_VERSIONS:
        raise InvalidVersionError(version, SUPPORTED_VERSIONS)
