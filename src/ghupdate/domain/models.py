from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class SemanticVersion:
    major: int
    minor: int
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class UpdateVerdict:
    has_update: bool
    latest_version: str

    def to_dict(self) -> dict:
        return {"has_update": self.has_update, "latest_version": self.latest_version}
