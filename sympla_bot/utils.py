from typing import Any, Dict


def as_text(v: Any) -> str:
    if v is None:
        return ""
    return str(v)


def as_float(v: Any) -> float:
    if v is None or v == "":
        return 0.0
    try:
        return float(v)
    except (TypeError, ValueError):
        return 0.0


def as_dict(v: Any) -> Dict[str, Any]:
    return v if isinstance(v, dict) else {}
