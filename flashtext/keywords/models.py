from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ExtractResult:
    """一次命中：label 为词典中登记的标签，start/end 为原文中的 code point 偏移（end 不含）。"""

    label: str
    start: int
    end: int

    @property
    def span(self) -> Tuple[int, int]:
        return self.start, self.end


@dataclass(frozen=True)
class ExtractOption:
    longest_match: bool = True

