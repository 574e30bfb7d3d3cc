"""
Validate + điền default cho raw params theo ModelSchema.

Chỉ None hoặc thiếu key mới tính là "không truyền". Giá trị falsy như
"", False, 0, [] được giữ nguyên và validate như mọi giá trị khác.
"""
import copy
import math
from typing import Any, Dict, List, Mapping

from .model import ModelSchema, ParameterSpec, ResolveResult

_TYPE_NAMES = {
    "string": "a string",
    "number": "a number",
    "boolean": "a boolean",
    "array": "an array",
}


def _fmt(value: Any) -> str:
    # 5.0 -> "5" cho message dễ đọc
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _matches_type(value: Any, type_name: str) -> bool:
    if type_name == "string":
        return isinstance(value, str)
    if type_name == "number":
        # bool là subclass của int nhưng không phải number
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if type_name == "boolean":
        return isinstance(value, bool)
    if type_name == "array":
        return isinstance(value, (list, tuple))
    return False


def _check_value(name: str, spec: ParameterSpec, value: Any) -> List[str]:
    if not _matches_type(value, spec.type):
        return [f"{name} must be {_TYPE_NAMES[spec.type]}"]

    errors = []
    if spec.type == "number":
        # NaN lọt qua mọi phép so sánh min/max
        if not math.isfinite(value):
            return [f"{name} must be a finite number"]
        if spec.min is not None and value < spec.min:
            errors.append(f"{name} must be at least {_fmt(spec.min)}")
        if spec.max is not None and value > spec.max:
            errors.append(f"{name} must be at most {_fmt(spec.max)}")
    elif spec.type == "string":
        if spec.min_length is not None and len(value) < spec.min_length:
            errors.append(f"{name} must be at least {spec.min_length} characters")
        if spec.max_length is not None and len(value) > spec.max_length:
            errors.append(f"{name} must be at most {spec.max_length} characters")
    elif spec.type == "array" and spec.items is not None:
        errors.extend(_check_items(name, spec, value))

    if spec.options is not None and value not in spec.options:
        allowed = ", ".join(_fmt(o) for o in spec.options)
        errors.append(f"{name} must be one of: {allowed}")
    return errors


def _check_items(name: str, spec: ParameterSpec, items) -> List[str]:
    errors = []
    for i, item in enumerate(items):
        prefix = f"{name}[{i}]"
        if not isinstance(item, Mapping):
            errors.append(f"{prefix} must be an object")
            continue
        for prop, prop_spec in spec.items.properties.items():
            if item.get(prop) is None:
                if prop_spec.required:
                    errors.append(f"{prefix}.{prop} is required")
                continue
            errors.extend(_check_value(f"{prefix}.{prop}", prop_spec, item[prop]))
    return errors


def resolve(schema: ModelSchema, raw: Mapping[str, Any]) -> ResolveResult:
    raw = raw or {}
    cleaned: Dict[str, Any] = {}
    errors: List[str] = []

    # Duyệt theo thứ tự khai báo trong schema, gom hết lỗi trong 1 lượt
    for name, spec in schema.parameters.items():
        value = raw.get(name)

        if value is None:
            if spec.required:
                errors.append(f"{name} is required")
            elif spec.has_default:
                cleaned[name] = copy.deepcopy(spec.default)
            continue

        field_errors = _check_value(name, spec, value)
        if field_errors:
            errors.extend(field_errors)
            continue

        cleaned[name] = list(value) if isinstance(value, tuple) else value

    if errors:
        return ResolveResult(is_valid=False, errors=errors)
    return ResolveResult(is_valid=True, cleaned=cleaned)
