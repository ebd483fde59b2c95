"""
数据模型层 - 定义图集帧数据结构

- Rect: 对外输出的像素矩形
- Frame/FrameValue: 导出JSON中单帧的几何描述
- FrameMap: 帧名 -> 帧描述 的映射（构造后不可变）
"""

from .frame import Frame, FrameMap, FrameValue
from .rect import Rect

__all__ = [
    "Rect",
    "Frame",
    "FrameValue",
    "FrameMap",
]
