"""
关键词匹配模块：
- 前缀树存储关键词（KeywordTrie）
- 单次扫描完成抽取 / 替换 / 打码（KeywordProcessor）
"""

from .models import ExtractOption, ExtractResult
from .processor import DEFAULT_BOUNDARY_CHARS, KeywordProcessor
from .trie import KeywordTrie

__all__ = [
    "DEFAULT_BOUNDARY_CHARS",
    "ExtractOption",
    "ExtractResult",
    "KeywordProcessor",
    "KeywordTrie",
]
