from __future__ import annotations

import re
from typing import NamedTuple

__all__ = ["version", "version_info"]


version = "0.3.0"


_re_version = re.compile(r"(\d+)\.(\d+)\.(\d+)(\D*)(\d*)")


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int
    releaselevel: str
    serial: int

    @classmethod
    def from_str(cls, v: str) -> VersionInfo:
        groups = _re_version.match(v).groups()  # type: ignore
        major, minor, micro = map(int, groups[:3])
        level = {"a": "alpha", "b": "beta", "c": "candidate", "r": "candidate"}.get(
            (groups[3] or "")[:1], "final"
        )
        serial = int(groups[4]) if groups[4] else 0
        return cls(major, minor, micro, level, serial)

    def __str__(self) -> str:
        v = f"{self.major}.{self.minor}.{self.micro}"
        if self.releaselevel != "final":
            v = f"{v}{self.releaselevel[:1]}{self.serial}"
        return v


version_info = VersionInfo.from_str(version)
