from __future__ import annotations

import re

from ghupdate.domain.errors import ParseError
from ghupdate.domain.models import SemanticVersion

# Unanchored on purpose: "release-1.2.3-beta" and "v1.2.3-rc1" both read as 1.2.3.
_VERSION_RE = re.compile(r"v?([0-9]+)\.([0-9]+)(?:\.([0-9]+))?")


def parse_version(text: str, side: str | None = None) -> SemanticVersion:
    m = _VERSION_RE.search(text or "")
    if m is None:
        raise ParseError(text, side=side)

    major, minor, patch = m.groups()
    return SemanticVersion(
        major=int(major),
        minor=int(minor),
        patch=int(patch) if patch else 0,
    )
