"""
Logging helpers that keep released values out of log output.
"""
# 说明：轻量级日志工具，为分析核心提供统一的 logger 获取入口。
# 职责：
# - PrivacyFilter：在启用掩码配置时隐藏日志记录上附带的发布值（release / value / payload）
# - configure_logging(...)：初始化 logging 基本配置并为根 logger 挂载隐私过滤器
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化
# 约定：
# - 日志级别优先级：显式参数 level > 环境变量 DPVALIDATOR_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import get_config

_MASKED_ATTRIBUTES = ("release", "value", "payload")


class PrivacyFilter(logging.Filter):
    """Filter that hides released values attached to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        config = get_config()
        if not config.mask_sensitive_fields:
            return True
        # 保留字段结构但隐藏具体内容
        for attr in _MASKED_ATTRIBUTES:
            if hasattr(record, attr):
                setattr(record, attr, "***")
        return True


def configure_logging(level: Optional[str] = None) -> None:
    log_level = level or os.environ.get("DPVALIDATOR_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )
    root = logging.getLogger()
    if not any(isinstance(f, PrivacyFilter) for f in root.filters):
        root.addFilter(PrivacyFilter())


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger，若尚无 handler，则懒加载方式调用 configure_logging 进行初始化
    logger = logging.getLogger(name)
    if not logger.handlers:
        configure_logging()
    return logger
