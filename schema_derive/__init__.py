"""Generate JSON Schema documents from Python types, dataclasses, named tuples and enums."""

__version__ = "0.0.2"
__all__ = ["attributes", "core", "derive"]