"""
解码模块 - 帧表解析/排序/投影为矩形

子模块：
- ordering: 帧名排序规则（先长度后字典序）
- frame_map_decoder: 文档解析与有序矩形输出
"""

from .frame_map_decoder import FrameMapDecoder, ordered_rects, parse
from .ordering import compare_names, name_sort_key

__all__ = [
    "FrameMapDecoder",
    "parse",
    "ordered_rects",
    "name_sort_key",
    "compare_names",
]
