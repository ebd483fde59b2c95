"""
帧表解码器 - 图集导出JSON -> FrameMap -> 有序矩形

流程：
1. parse: 反序列化 frames 映射（pydantic 严格整数校验）
2. ordered_rects: 按帧名排序（先长度后字典序）
3. 每个条目的 frame 直接投影为 Rect

测试要点：
- test_end_to_end_numbered_frames: "sheet 2.png" 排在 "sheet 10.png" 之前
- test_parse_missing_wh: 缺少 w/h 抛 MalformedDocument
- test_empty_frames: 空映射得到空列表
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from ..config import RuntimeConfig, get_config
from ..interfaces import IFrameMapDecoder, MalformedDocument
from ..models import FrameMap, Rect
from .ordering import NameLength, name_sort_key

logger = logging.getLogger(__name__)


class FrameMapDecoder(IFrameMapDecoder):
    """帧表解码器实现（无状态，可被多个调用方共享）"""

    def __init__(
        self,
        config: RuntimeConfig | None = None,
        name_length: NameLength | None = None,
    ) -> None:
        cfg = config or get_config()
        self.name_length: NameLength = name_length or cfg.decoder.name_length

    def parse(self, document: bytes | str) -> FrameMap:
        """解析文档，失败时整体拒绝"""
        try:
            frame_map = FrameMap.model_validate_json(document)
        except ValidationError as e:
            logger.warning(f"图集文档解析失败: {e.error_count()} 处错误")
            raise MalformedDocument(f"图集文档格式错误: {e}") from e
        except ValueError as e:
            # 非法UTF-8等在进入校验前就失败的情况
            logger.warning(f"图集文档无法解码: {e}")
            raise MalformedDocument(f"图集文档无法解码: {e}") from e

        logger.debug(f"解析图集文档: {len(frame_map)} 帧")
        return frame_map

    def ordered_names(self, frame_map: FrameMap) -> list[str]:
        """按排序规则输出帧名"""
        return sorted(
            frame_map.frames,
            key=lambda name: name_sort_key(name, self.name_length),
        )

    def ordered_frames(self, frame_map: FrameMap) -> list[tuple[str, Rect]]:
        """有序 (帧名, 矩形) 列表"""
        return [
            (name, frame_map.frames[name].frame.to_rect())
            for name in self.ordered_names(frame_map)
        ]

    def ordered_rects(self, frame_map: FrameMap) -> list[Rect]:
        """有序矩形列表"""
        return [rect for _, rect in self.ordered_frames(frame_map)]


# 便捷函数
def parse(document: bytes | str) -> FrameMap:
    """解析图集文档"""
    return FrameMapDecoder().parse(document)


def ordered_rects(frame_map: FrameMap) -> list[Rect]:
    """按帧名自然顺序输出矩形"""
    return FrameMapDecoder().ordered_rects(frame_map)
