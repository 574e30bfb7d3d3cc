"""
Chuyển giá trị widget Streamlit -> raw params gửi lên /generate.

Quy ước: widget bỏ trống (text rỗng, number None, select None) = không truyền,
để backend tự điền default / báo "is required".
"""
import json
from typing import Any, Dict, Mapping, Optional


def _split_csv(text: str):
    return [part.strip() for part in text.split(",") if part.strip()]


def to_param_value(spec: Mapping[str, Any], value: Any) -> Optional[Any]:
    if value is None:
        return None
    ptype = spec.get("type")

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if ptype == "array":
            if spec.get("items"):
                # array object (vd: colors) nhập dạng JSON
                try:
                    return json.loads(text)
                except json.JSONDecodeError:
                    return text  # để backend báo "must be an array"
            return _split_csv(text)
        return text

    if ptype == "number" and isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def collect_params(parameters: Mapping[str, Mapping[str, Any]], values: Mapping[str, Any]) -> Dict[str, Any]:
    params = {}
    for name, spec in parameters.items():
        converted = to_param_value(spec, values.get(name))
        if converted is not None:
            params[name] = converted
    return params
