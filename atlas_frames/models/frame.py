"""
帧数据模型 - 对应图集导出JSON的 frames 结构

    {"frames": {"<name>": {"frame": {"x": 0, "y": 0, "w": 8, "h": 8}, ...}}, ...}

未知字段一律忽略（向前兼容），x/y/w/h 必须是非负整数
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from .rect import Rect

# 与导出工具的 usize 取值范围一致
MAX_COORD = 2**64 - 1


class Frame(BaseModel):
    """单帧几何（导出文件中的 frame 对象）"""
    x: int = Field(..., ge=0, le=MAX_COORD, strict=True)
    y: int = Field(..., ge=0, le=MAX_COORD, strict=True)
    w: int = Field(..., ge=0, le=MAX_COORD, strict=True)
    h: int = Field(..., ge=0, le=MAX_COORD, strict=True)

    model_config = {"frozen": True}

    def to_rect(self) -> Rect:
        """直接映射为Rect，不做坐标变换/缩放"""
        return Rect(x=self.x, y=self.y, width=self.w, height=self.h)


class FrameValue(BaseModel):
    """frames 下每个条目（除 frame 外的字段如 rotated/trimmed/duration 均忽略）"""
    frame: Frame

    model_config = {"frozen": True}


class FrameMap(BaseModel):
    """帧名 -> 帧条目

    映射只读；迭代顺序没有业务含义，需要有序结果时请走 FrameMapDecoder.ordered_rects
    """
    frames: Annotated[Mapping[str, FrameValue], AfterValidator(MappingProxyType)] = Field(
        ..., description="帧名到帧条目的映射（只读）"
    )

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.frames)

    def __contains__(self, name: object) -> bool:
        return name in self.frames

    def get_rect(self, name: str) -> Rect | None:
        """按帧名取矩形"""
        value = self.frames.get(name)
        return value.frame.to_rect() if value else None
