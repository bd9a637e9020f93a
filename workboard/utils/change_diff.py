from typing import Any, Dict

from workboard.constants.audit import REDACTED, SENSITIVE_KEY_FRAGMENTS

_MISSING = object()


def _same_value(old_value: Any, new_value: Any) -> bool:
    # bool is an int subclass, so True == 1 would hide a type change
    if type(old_value) is not type(new_value):
        return False
    if isinstance(old_value, dict):
        return old_value.keys() == new_value.keys() and all(
            _same_value(old_value[key], new_value[key]) for key in old_value
        )
    if isinstance(old_value, list):
        return len(old_value) == len(new_value) and all(
            _same_value(old_item, new_item) for old_item, new_item in zip(old_value, new_value)
        )
    return old_value == new_value


def is_sensitive_key(key: str) -> bool:
    lowered = str(key).lower()
    return any(fragment in lowered for fragment in SENSITIVE_KEY_FRAGMENTS)


def _sanitize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return sanitize_data(value)
    if isinstance(value, list):
        return [_sanitize_value(item) for item in value]
    return value


def sanitize_data(data: Dict[str, Any] | None) -> Dict[str, Any]:
    """
    Return a copy of `data` with every sensitive key, at any depth, replaced by the
    redaction marker.
    """
    if not data:
        return {}

    sanitized = {}
    for key, value in data.items():
        if is_sensitive_key(key):
            sanitized[key] = REDACTED
        else:
            sanitized[key] = _sanitize_value(value)
    return sanitized


def calculate_changes(previous: Dict[str, Any] | None, current: Dict[str, Any] | None) -> Dict[str, Dict[str, Any]]:
    """
    Compute the field-level difference between two snapshots.

    The result maps each differing key to ``{"from": old, "to": new}``. Values are compared
    by deep equality. A key missing on one side is recorded as ``None`` on that side.
    Sensitive keys are compared on their real values but recorded as redaction markers.
    """
    previous = previous or {}
    current = current or {}
    changes: Dict[str, Dict[str, Any]] = {}

    for key in list(current.keys()) + [key for key in previous.keys() if key not in current]:
        old_value = previous.get(key, _MISSING)
        new_value = current.get(key, _MISSING)
        if _same_value(old_value, new_value):
            continue

        if is_sensitive_key(key):
            changes[key] = {"from": REDACTED, "to": REDACTED}
            continue

        changes[key] = {
            "from": None if old_value is _MISSING else _sanitize_value(old_value),
            "to": None if new_value is _MISSING else _sanitize_value(new_value),
        }

    return changes
