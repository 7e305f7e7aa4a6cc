from __future__ import annotations
from typing import Optional, Protocol

class LineSource(Protocol):
    line_number: int

    def peek(self) -> Optional[str]: ...
    def read(self) -> str: ...
