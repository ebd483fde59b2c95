"""
配置层 - 运行期配置加载

职责：
- 加载 config/atlas_frames.yaml（运行期参数，可选）
- 提供环境变量覆盖机制（ATLAS_FRAMES_ 前缀）
- 日志初始化
"""

from .runtime_config import (
    DecoderConfig,
    LoggingConfig,
    RuntimeConfig,
    configure_logging,
    get_config,
    reload_config,
)

__all__ = [
    "RuntimeConfig",
    "DecoderConfig",
    "LoggingConfig",
    "configure_logging",
    "get_config",
    "reload_config",
]
