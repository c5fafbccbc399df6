"""
Error types raised by the animation engine

Stale owners, emptied animations and duplicate captures are not errors and
never raise; they are resolved by dropping or reusing records.
"""

from typing import Optional


class AnimationError(Exception):
    """Base class for engine errors"""
    def __init__(self, code: str, message: str, details: Optional[dict] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ContextCorruptedError(AnimationError):
    """Definition stack released out of order"""
    def __init__(self, expected, actual):
        super().__init__(
            code="CONTEXT_CORRUPTED",
            message="Definition context popped out of order",
            details={"expected": repr(expected), "actual": repr(actual)}
        )


class ConfigError(AnimationError):
    """Config value is missing or invalid"""
    def __init__(self, key: str, value, reason: str):
        super().__init__(
            code="INVALID_CONFIG",
            message=f"Invalid config value for '{key}': {reason}",
            details={"key": key, "value": value}
        )
