"""
模块接口契约 - 定义解码器的抽象接口与异常

设计原则：
1. 宿主（渲染/资源层）只依赖接口，不依赖具体实现
2. 输入为已加载好的文档字节，输出为有序矩形列表
3. 便于单元测试和mock替换

使用方式：
    from atlas_frames.interfaces import IFrameMapDecoder

    class MyDecoder(IFrameMapDecoder):
        def parse(self, document: bytes) -> FrameMap:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import FrameMap, Rect


# ============================================================================
# 解码模块接口
# ============================================================================

class IFrameMapDecoder(ABC):
    """帧表解码器接口 - 文档字节 -> FrameMap -> 有序矩形"""

    @abstractmethod
    def parse(self, document: bytes | str) -> FrameMap:
        """
        解析图集导出文档

        Args:
            document: 宿主已读入的文档内容（UTF-8 JSON）

        Returns:
            帧名到帧条目的映射

        Raises:
            MalformedDocument: 语法错误或结构不符（不返回部分结果）
        """
        ...

    @abstractmethod
    def ordered_rects(self, frame_map: FrameMap) -> list[Rect]:
        """
        按帧名自然顺序输出矩形

        Args:
            frame_map: parse 的结果

        Returns:
            每个条目恰好一个矩形；空映射返回空列表
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class AtlasFramesError(Exception):
    """基础异常"""
    pass


class MalformedDocument(AtlasFramesError):
    """文档格式错误（非法JSON / 缺少frames、frame、x/y/w/h / 非整数取值）"""
    pass
