"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(decoder, numbered_document):
        frame_map = decoder.parse(numbered_document)
"""

from __future__ import annotations

import json

import pytest

from atlas_frames.config import DecoderConfig, RuntimeConfig
from atlas_frames.decoder import FrameMapDecoder
from atlas_frames.models import FrameMap, Rect


def _make_document(frames: dict[str, tuple[int, int, int, int]], **extra) -> bytes:
    """按 {name: (x, y, w, h)} 构造导出文档"""
    payload = {
        "frames": {
            name: {"frame": {"x": x, "y": y, "w": w, "h": h}}
            for name, (x, y, w, h) in frames.items()
        },
        **extra,
    }
    return json.dumps(payload).encode("utf-8")


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置（默认值）"""
    return RuntimeConfig()


@pytest.fixture
def decoder(runtime_config: RuntimeConfig) -> FrameMapDecoder:
    """默认解码器（UTF-8字节长度口径）"""
    return FrameMapDecoder(runtime_config)


@pytest.fixture
def codepoint_decoder() -> FrameMapDecoder:
    """按字符计长度的解码器"""
    return FrameMapDecoder(RuntimeConfig(decoder=DecoderConfig(name_length="codepoints")))


# ============================================================================
# 文档 Fixtures
# ============================================================================

@pytest.fixture
def numbered_document() -> bytes:
    """典型的编号帧导出（sheet 1 .. sheet 12，乱序写入）"""
    frames = {
        f"sheet {i}.aseprite": (i * 16, 0, 16, 16)
        for i in (10, 3, 1, 12, 2, 11, 5, 4, 9, 6, 8, 7)
    }
    return _make_document(frames)


@pytest.fixture
def aseprite_document() -> bytes:
    """带完整附加字段的导出（未知字段应被忽略）"""
    payload = {
        "frames": {
            "hero 1.aseprite": {
                "frame": {"x": 32, "y": 0, "w": 32, "h": 32},
                "rotated": False,
                "trimmed": False,
                "spriteSourceSize": {"x": 0, "y": 0, "w": 32, "h": 32},
                "sourceSize": {"w": 32, "h": 32},
                "duration": 100,
            },
            "hero 0.aseprite": {
                "frame": {"x": 0, "y": 0, "w": 32, "h": 32},
                "rotated": False,
                "trimmed": False,
                "spriteSourceSize": {"x": 0, "y": 0, "w": 32, "h": 32},
                "sourceSize": {"w": 32, "h": 32},
                "duration": 100,
            },
        },
        "meta": {
            "app": "https://www.aseprite.org/",
            "version": "1.3",
            "image": "hero.png",
            "format": "RGBA8888",
            "size": {"w": 64, "h": 32},
            "scale": "1",
        },
    }
    return json.dumps(payload).encode("utf-8")


@pytest.fixture
def sample_frame_map(decoder: FrameMapDecoder) -> FrameMap:
    """两位数序号与一位数序号混排"""
    return decoder.parse(_make_document({
        "sheet 10.png": (10, 0, 8, 8),
        "sheet 2.png": (2, 0, 8, 8),
    }))


@pytest.fixture
def sample_rect() -> Rect:
    """示例矩形"""
    return Rect(x=4, y=8, width=16, height=32)


@pytest.fixture
def make_document():
    """文档构造函数：make_document({name: (x, y, w, h)})"""
    return _make_document
