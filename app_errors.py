from __future__ import annotations

import errno


class RainbowError(Exception):
    pass


class InvalidArcGeometry(RainbowError, ValueError):
    """Raised when an arc is requested with a non-positive or non-finite value."""


def classify_exception(exc: Exception) -> str:
    if isinstance(exc, InvalidArcGeometry):
        return "geometry"
    if isinstance(exc, PermissionError):
        return "permission"
    if isinstance(exc, FileNotFoundError):
        return "not_found"
    if isinstance(exc, OSError) and exc.errno == errno.ENOSPC:
        return "disk_full"
    text = str(exc).lower()
    if any(k in text for k in ("permission denied", "read-only", "access is denied")):
        return "permission"
    if any(k in text for k in ("no such file", "not found")):
        return "not_found"
    if "no space left" in text:
        return "disk_full"
    return "unknown"


def user_message(kind: str, context: str = "general") -> str:
    if context == "export":
        mapping = {
            "permission": "Export failed: output directory is not writable.",
            "not_found": "Export failed: output directory does not exist.",
            "disk_full": "Export failed: no space left on device.",
            "geometry": "Export failed: rainbow geometry is invalid.",
            "unknown": "Export failed. Please retry.",
        }
        return mapping.get(kind, mapping["unknown"])

    if context == "settings":
        mapping = {
            "permission": "Settings could not be saved: config directory is not writable.",
            "disk_full": "Settings could not be saved: no space left on device.",
            "unknown": "Settings could not be saved.",
        }
        return mapping.get(kind, mapping["unknown"])

    return "Operation failed. Please retry."
