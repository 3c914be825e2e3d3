"""Loading program images from disk."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Rom:
    """A program image read from a file."""

    data: bytes

    @classmethod
    def load(cls, filename: str | os.PathLike[str]) -> Rom:
        """Read a ROM file; raises OSError if it cannot be read."""
        return cls(Path(filename).read_bytes())