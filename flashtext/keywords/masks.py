"""
mask_keywords 的常用替换函数。

替换函数接收命中的（已归一化的）关键词，返回写回文本的内容；
返回空串即删除命中片段。
"""

from __future__ import annotations

from typing import Callable

MaskFunc = Callable[[str], str]


def identity_mask(keyword: str) -> str:
    return keyword


def char_mask(mask_char: str = "*") -> MaskFunc:
    """每个字符替换为 mask_char，长度不变。"""

    def _mask(keyword: str) -> str:
        return mask_char * len(keyword)

    return _mask


def bracket_mask(mask_char: str = "X", left: str = ":", right: str = ":") -> MaskFunc:
    """'secret' -> ':XXXXXX:'"""

    def _mask(keyword: str) -> str:
        return f"{left}{mask_char * len(keyword)}{right}"

    return _mask


def fixed_mask(replacement: str) -> MaskFunc:
    def _mask(keyword: str) -> str:
        return replacement

    return _mask
