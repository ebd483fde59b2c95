"""
像素矩形模型 - 解码结果对外输出的最小单元

左上角为原点，width/height 为不含终点的像素跨度
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Rect(BaseModel):
    """像素矩形"""
    x: int = Field(..., ge=0, description="左上角X")
    y: int = Field(..., ge=0, description="左上角Y")
    width: int = Field(..., ge=0, description="宽度")
    height: int = Field(..., ge=0, description="高度")

    model_config = {"frozen": True}

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def as_tuple(self) -> tuple[int, int, int, int]:
        """(x, y, width, height)，便于直接交给渲染层"""
        return (self.x, self.y, self.width, self.height)
