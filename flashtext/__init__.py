"""
flashtext - 基于前缀树的多关键词抽取 / 替换 / 打码
"""

from flashtext.keywords import (
    DEFAULT_BOUNDARY_CHARS,
    ExtractOption,
    ExtractResult,
    KeywordProcessor,
    KeywordTrie,
)
from flashtext.keywords import masks

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BOUNDARY_CHARS",
    "ExtractOption",
    "ExtractResult",
    "KeywordProcessor",
    "KeywordTrie",
    "masks",
]
