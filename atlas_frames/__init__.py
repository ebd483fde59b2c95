"""
atlas-frames - 精灵图集帧数据解码

模块结构：
- config/     运行期配置（排序长度口径/日志）
- models/     数据模型定义（Rect/Frame/FrameMap）
- decoder/    帧表解析与排序
- interfaces  接口契约与异常定义
"""

from .decoder import FrameMapDecoder, ordered_rects, parse
from .interfaces import AtlasFramesError, MalformedDocument
from .models import FrameMap, Rect

__version__ = "0.1.0"

__all__ = [
    "FrameMapDecoder",
    "parse",
    "ordered_rects",
    "FrameMap",
    "Rect",
    "AtlasFramesError",
    "MalformedDocument",
]
