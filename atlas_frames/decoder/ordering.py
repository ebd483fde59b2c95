"""
帧名排序规则 - 近似"自然数字序"

导出的帧名形如 "<sheet name> <n>.aseprite"，同一图集内前缀/后缀长度固定，
只有序号位数变化。因此：
1. 长度短的在前
2. 长度长的在后
3. 长度相同则按普通字典序

注意：这是启发式规则，不是真正的数字排序；前缀长度不一致的帧名不保证按序号排列。
"""

from __future__ import annotations

from typing import Literal

NameLength = Literal["utf8_bytes", "codepoints"]


def name_length(name: str, mode: NameLength = "utf8_bytes") -> int:
    """帧名长度（默认按UTF-8字节计）"""
    if mode == "codepoints":
        return len(name)
    return len(name.encode("utf-8"))


def name_sort_key(name: str, mode: NameLength = "utf8_bytes") -> tuple[int, str]:
    """排序键：(长度, 帧名)"""
    return (name_length(name, mode), name)


def compare_names(a: str, b: str, mode: NameLength = "utf8_bytes") -> int:
    """三路比较，返回 -1/0/1"""
    ka = name_sort_key(a, mode)
    kb = name_sort_key(b, mode)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0
