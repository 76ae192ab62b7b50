from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

ROOT = 0


class KeywordTrie:
    """
    关键词前缀树（数组化节点，整数句柄寻址）。

    - 每个节点只保存实际存在的边：code point -> 子节点句柄
    - 终止节点记录插入时的（已归一化）关键词，作为词典查找键
    - 删除只清除终止标记，不回收节点（构建后查询为主，节点常驻可接受）

    不关心边界字符、大小写折叠、标签，这些由 KeywordProcessor 负责。
    """

    def __init__(self, keywords: Iterable[str] = ()) -> None:
        self._next: List[Dict[str, int]] = [dict()]
        self._terminal: List[Optional[str]] = [None]
        self._keyword_count = 0
        for keyword in keywords:
            self.insert(keyword)

    def __len__(self) -> int:
        return self._keyword_count

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and self.contains(keyword)

    def __iter__(self) -> Iterator[str]:
        return self.keywords()

    @property
    def node_count(self) -> int:
        return len(self._next)

    def insert(self, keyword: str) -> None:
        if not keyword:
            return
        state = ROOT
        for ch in keyword:
            nxt = self._next[state].get(ch)
            if nxt is None:
                nxt = len(self._next)
                self._next[state][ch] = nxt
                self._next.append(dict())
                self._terminal.append(None)
            state = nxt
        if self._terminal[state] is None:
            self._keyword_count += 1
        self._terminal[state] = keyword

    def remove(self, keyword: str) -> bool:
        """清除 keyword 的终止标记；路径不存在或非终止时什么也不做，返回 False。"""
        state = self._find(keyword)
        if state is None or self._terminal[state] is None:
            return False
        self._terminal[state] = None
        self._keyword_count -= 1
        return True

    def contains(self, keyword: str) -> bool:
        state = self._find(keyword)
        return state is not None and self._terminal[state] is not None

    def child(self, node: int, ch: str) -> Optional[int]:
        return self._next[node].get(ch)

    def terminal(self, node: int) -> Optional[str]:
        return self._terminal[node]

    def keywords(self) -> Iterator[str]:
        """按插入路径深度优先遍历全部有效关键词。"""
        stack: List[Iterator[int]] = [iter(self._next[ROOT].values())]
        while stack:
            nxt = next(stack[-1], None)
            if nxt is None:
                stack.pop()
                continue
            word = self._terminal[nxt]
            if word is not None:
                yield word
            stack.append(iter(self._next[nxt].values()))

    def _find(self, keyword: str) -> Optional[int]:
        if not keyword:
            return None
        state = ROOT
        for ch in keyword:
            nxt = self._next[state].get(ch)
            if nxt is None:
                return None
            state = nxt
        return state
