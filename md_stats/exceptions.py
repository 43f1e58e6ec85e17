"""Exceptions raised while collecting md device statistics"""


class MdStatsError(Exception):
    """Base class for all collector errors"""


class ConfigError(MdStatsError):
    """Configuration file exists but could not be loaded"""


class DeviceListError(MdStatsError):
    """Block device directory is missing or cannot be listed"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot list devices in {path}: {reason}")


class AttributeReadError(MdStatsError):
    """Attribute directory or file could not be opened or read"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class AttributeParseError(MdStatsError):
    """Attribute file does not hold a valid 64-bit integer"""

    def __init__(self, path: str, value: str):
        self.path = path
        self.value = value
        super().__init__(f"Invalid integer value {value!r} in {path}")
