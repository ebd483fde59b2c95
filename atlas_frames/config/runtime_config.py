"""
运行期配置 - 读取 config/atlas_frames.yaml

职责：
- 加载排序口径/日志等运行参数
- 提供环境变量覆盖机制
- 类型安全的配置访问
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

DEFAULT_CONFIG_PATH = Path("config/atlas_frames.yaml")


class DecoderConfig(BaseModel):
    """解码器配置"""

    # 帧名长度口径：utf8_bytes 与导出工具一致；codepoints 按字符计
    name_length: Literal["utf8_bytes", "codepoints"] = "utf8_bytes"


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_to_file: bool = False
    log_file: Path = Path("logs/atlas_frames.log")


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    decoder: DecoderConfig = Field(default_factory=DecoderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "ATLAS_FRAMES_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """环境变量优先于构造参数（含YAML取值）"""
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置（文件不存在时使用默认值）"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})

        # 以dict传入，与环境变量逐字段合并
        config = cls(
            decoder=cls._extract(runtime_opts, "decoder"),
            logging=cls._extract(runtime_opts, "logging"),
        )

        config._resolve_paths(base_dir=path.parent)
        return config

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置（支持 {default: v} 写法）"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    def _resolve_paths(self, base_dir: Path) -> None:
        """日志文件相对路径以配置文件所在目录为基准"""
        if not self.logging.log_file.is_absolute():
            self.logging.log_file = (base_dir / self.logging.log_file).resolve()


def configure_logging(config: RuntimeConfig | None = None) -> None:
    """按配置初始化根日志"""
    cfg = (config or get_config()).logging
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if cfg.log_to_file:
        cfg.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(cfg.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


# 全局配置实例
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    path = yaml_path or DEFAULT_CONFIG_PATH
    _config = RuntimeConfig.from_yaml(path)
    return _config
