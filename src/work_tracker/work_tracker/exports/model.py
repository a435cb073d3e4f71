from __future__ import annotations

import base64
from dataclasses import dataclass


@dataclass(frozen=True)
class ExportFile:
    filename: str
    mimetype: str
    content: bytes

    def as_base64(self) -> str:
        return base64.b64encode(self.content).decode("ascii")
