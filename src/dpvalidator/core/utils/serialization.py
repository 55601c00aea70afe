"""
Serialization helpers for analysis artefacts.

Provides JSON helpers that understand dataclasses, enums and numpy values
so properties, expansion patches and release records can be logged or
handed to the reporting layer.
"""
# 说明：序列化辅助工具，统一 JSON 编码行为。
# 职责：
# - _prepare：支持 dataclass、实现 to_dict 的对象、枚举、numpy 数组/标量与元组的统一前处理
# - serialize_to_json：带可选敏感字段掩码的 JSON 序列化接口
# - mask_sensitive_data：对给定字典中的敏感字段进行掩码处理

from __future__ import annotations

import enum
import json
from dataclasses import fields, is_dataclass
from typing import Any, Dict, Optional, Sequence

import numpy as np

SensitiveFields = Sequence[str]


def mask_sensitive_data(payload: Dict[str, Any], sensitive_fields: SensitiveFields, mask: str = "***") -> Dict[str, Any]:
    masked = dict(payload)
    for name in sensitive_fields:
        if name in masked:
            masked[name] = mask
    return masked


def _prepare(obj: Any) -> Any:
    # 递归地将对象转换为可 JSON 序列化的基础结构
    if hasattr(obj, "to_dict"):
        return _prepare(obj.to_dict())
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _prepare(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, dict):
        return {str(key): _prepare(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_prepare(value) for value in obj]
    return obj


def serialize_to_json(
    obj: Any,
    *,
    sensitive_fields: Optional[SensitiveFields] = None,
) -> str:
    payload = _prepare(obj)
    if isinstance(payload, dict) and sensitive_fields:
        payload = mask_sensitive_data(payload, sensitive_fields)
    return json.dumps(payload, ensure_ascii=False)
