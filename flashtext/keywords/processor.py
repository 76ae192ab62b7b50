from __future__ import annotations

import string
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Dict, Iterator, List, Optional, Set, Tuple

from loguru import logger

from flashtext.core.config import Settings, settings
from flashtext.core.rwlock import ReadWriteLock
from flashtext.keywords.models import ExtractOption, ExtractResult
from flashtext.keywords.trie import ROOT, KeywordTrie

DEFAULT_BOUNDARY_CHARS = frozenset(string.ascii_letters + string.digits + "-")


# 大小写折叠逐 code point 进行，与上下文无关（不做希腊语词尾 σ -> ς 之类的处理）；
# 折叠结果不是单个 code point 的字符（如 'ß'.upper()）保持原样，
# 因此折叠前后长度一致，偏移可直接映射回原文。
@lru_cache(maxsize=4096)
def _fold_lower(ch: str) -> str:
    folded = ch.lower()
    return folded if len(folded) == 1 else ch


@lru_cache(maxsize=4096)
def _fold_upper(ch: str) -> str:
    folded = ch.upper()
    return folded if len(folded) == 1 else ch


@dataclass(frozen=True)
class _Match:
    keyword: str  # 归一化后的 trie 关键词
    start: int
    end: int


class KeywordProcessor:
    """
    多关键词抽取 / 替换 / 打码（单次扫描）。

    - 关键词存入 KeywordTrie，词典记录 归一化关键词 -> 标签
    - 只在词边界命中：命中须从一段“词字符”的开头开始，并恰好在该段结尾处结束
    - 默认最长匹配；ExtractOption(longest_match=False) 时命中第一个可用关键词即提交

    extract / replace / mask 共用同一个扫描器，命中判定完全一致，只是消费方式不同。

    并发约定：写操作（增删关键词、改边界字符、改大小写）独占；扫描与查询共享读锁。
    mask_fn 在扫描释放读锁之后才调用，可以回调本 processor。
    """

    def __init__(
        self,
        case_sensitive: Optional[bool] = None,
        *,
        fold_upper: Optional[bool] = None,
        config: Optional[Settings] = None,
    ) -> None:
        config = config or settings
        self._trie = KeywordTrie()
        self._labels: Dict[str, str] = {}
        self._case_sensitive = config.CASE_SENSITIVE if case_sensitive is None else bool(case_sensitive)
        self._fold_upper = config.FOLD_UPPER if fold_upper is None else bool(fold_upper)
        self._boundary_chars: Set[str] = set(DEFAULT_BOUNDARY_CHARS) | set(config.EXTRA_BOUNDARY_CHARS)
        self._default_option = ExtractOption(longest_match=config.LONGEST_MATCH)
        self._lock = ReadWriteLock()

    # ------------------------------------------------------------------
    # configuration
    # ------------------------------------------------------------------
    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @property
    def boundary_chars(self) -> frozenset:
        with self._lock.read():
            return frozenset(self._boundary_chars)

    def set_case_sensitive(self, case_sensitive: bool) -> None:
        """只影响之后的插入与扫描；已插入的关键词不会重新归一化，应在添加关键词前设置。"""
        with self._lock.write():
            self._case_sensitive = bool(case_sensitive)
        logger.debug(f"case_sensitive set to {self._case_sensitive}")

    def add_boundary_chars(self, *chars: str) -> None:
        """每个参数可以包含多个字符，逐个加入词字符集合。"""
        with self._lock.write():
            for group in chars:
                self._boundary_chars.update(group)
        logger.debug(f"boundary chars added: {''.join(chars)!r}")

    def remove_boundary_chars(self, *chars: str) -> None:
        with self._lock.write():
            for group in chars:
                self._boundary_chars.difference_update(group)
        logger.debug(f"boundary chars removed: {''.join(chars)!r}")

    # ------------------------------------------------------------------
    # dictionary mutation
    # ------------------------------------------------------------------
    def add_keyword(
        self,
        keyword: str,
        label: Optional[str] = None,
        *,
        case_sensitive: Optional[bool] = None,
    ) -> None:
        """
        Add ``keyword``; matches report ``label`` (stored verbatim).

        Without a label an existing entry for the keyword is kept, otherwise the
        normalized keyword becomes its own label. ``case_sensitive=True`` inserts
        the keyword unfolded even on a case-insensitive processor.
        """
        with self._lock.write():
            normalized = self._normalize(keyword, case_sensitive)
            if not normalized:
                return
            self._trie.insert(normalized)
            if label is not None:
                self._labels[normalized] = label
            else:
                self._labels.setdefault(normalized, normalized)
            stored_label = self._labels[normalized]
        logger.debug(f"keyword added: {normalized!r} -> {stored_label!r}")

    def add_keywords(self, *keywords: str) -> None:
        for keyword in keywords:
            self.add_keyword(keyword)

    def remove_keyword(self, keyword: str, *, case_sensitive: Optional[bool] = None) -> bool:
        """
        Remove ``keyword`` from the trie. Its label entry is kept.

        ``case_sensitive=True`` looks the keyword up unfolded, for keywords that
        were added with the same override.
        """
        with self._lock.write():
            removed = self._trie.remove(self._normalize(keyword, case_sensitive))
        if removed:
            logger.debug(f"keyword removed: {keyword!r}")
        return removed

    def remove_keywords(self, *keywords: str) -> int:
        removed = 0
        for keyword in keywords:
            if self.remove_keyword(keyword):
                removed += 1
        return removed

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------
    def exists(self, keyword: str, *, case_sensitive: Optional[bool] = None) -> bool:
        with self._lock.read():
            return self._trie.contains(self._normalize(keyword, case_sensitive))

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and self.exists(keyword)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._trie)

    def get_label(self, keyword: str) -> Optional[str]:
        with self._lock.read():
            normalized = self._normalize(keyword)
            if not self._trie.contains(normalized):
                return None
            return self._labels.get(normalized, normalized)

    def extract_keywords(self, text: str, option: Optional[ExtractOption] = None) -> List[ExtractResult]:
        option = option or self._default_option
        if not text:
            return []
        with self._lock.read():
            results = [
                ExtractResult(self._label_for(m.keyword), m.start, m.end)
                for m in self._scan(self._normalize(text), option.longest_match)
            ]
        logger.debug(f"extract_keywords: {len(results)} matches")
        return results

    def replace_keywords(
        self, text: str, option: Optional[ExtractOption] = None
    ) -> Tuple[str, List[ExtractResult]]:
        """
        Replace every match with its label.

        Returned positions are in the coordinates of the input ``text``, not of
        the rewritten string.
        """
        option = option or self._default_option
        if not text:
            return text, []
        with self._lock.read():
            results = [
                ExtractResult(self._label_for(m.keyword), m.start, m.end)
                for m in self._scan(self._normalize(text), option.longest_match)
            ]
        replaced = self._splice(text, [(r.start, r.end, r.label) for r in results])
        logger.debug(f"replace_keywords: {len(results)} matches")
        return replaced, results

    def mask_keywords(
        self,
        text: str,
        mask_fn: Callable[[str], str],
        option: Optional[ExtractOption] = None,
    ) -> str:
        """
        Replace every match with ``mask_fn(matched_keyword)``; the keyword is passed in normalized form.

        ``mask_fn`` is called after the scan has released the lock, so it may
        query or even modify this processor; such changes do not affect the
        current call.
        """
        option = option or self._default_option
        if not text:
            return text
        with self._lock.read():
            matches = list(self._scan(self._normalize(text), option.longest_match))
        return self._splice(text, [(m.start, m.end, mask_fn(m.keyword)) for m in matches])

    # ------------------------------------------------------------------
    # internals (_scan / _label_for: caller holds the lock)
    # ------------------------------------------------------------------
    def _label_for(self, keyword: str) -> str:
        return self._labels.get(keyword, keyword)

    def _normalize(self, text: str, case_sensitive: Optional[bool] = None) -> str:
        if self._case_sensitive if case_sensitive is None else case_sensitive:
            return text
        fold = _fold_upper if self._fold_upper else _fold_lower
        return "".join([fold(ch) for ch in text])

    def _scan(self, folded: str, longest: bool) -> Iterator[_Match]:
        trie = self._trie
        boundary = self._boundary_chars
        size = len(folded)
        idx = 0
        at_token_start = True
        while idx < size:
            if folded[idx] not in boundary:
                idx += 1
                at_token_start = True
                continue
            if not at_token_start:
                idx += 1
                continue

            at_token_start = False
            found: Optional[_Match] = None
            node = ROOT
            for j in range(idx, size):
                nxt = trie.child(node, folded[j])
                if nxt is None:
                    break
                node = nxt
                keyword = trie.terminal(node)
                if keyword is not None and (j + 1 == size or folded[j + 1] not in boundary):
                    found = _Match(keyword, idx, j + 1)
                    if not longest:
                        break

            if found is None:
                idx += 1
            else:
                yield found
                # found.end 处（若存在）必为非词字符，下一轮会重新标记词首
                idx = found.end

    @staticmethod
    def _splice(text: str, replacements: List[Tuple[int, int, str]]) -> str:
        # (start, end) 是原文坐标；offset 只用于换算到 buffer 中的位置
        buffer = list(text)
        offset = 0
        for start, end, replacement in replacements:
            buffer[start + offset : end + offset] = replacement
            offset += len(replacement) - (end - start)
        return "".join(buffer)
