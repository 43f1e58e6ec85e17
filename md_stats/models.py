"""Data models for md device statistics"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MdDevice:
    """Represents a software RAID array found in the block device directory"""

    name: str                        # Device name (e.g., md0)

    def to_discovery(self) -> dict:
        """Convert device to a low-level discovery entry"""
        return {"{#MD.NAME}": self.name}


@dataclass
class MDStats:
    """Attributes from the md/ subdirectory of an array"""

    level: str = ""                  # md/level (e.g., raid1)
    array_state: str = ""            # md/array_state
    degraded: int = 0                # md/degraded
    max_read_errors: int = 0         # md/max_read_errors
    metadata_version: str = ""       # md/metadata_version
    mismatch_cnt: int = 0            # md/mismatch_cnt
    preread_bypass_threshold: int = 0  # md/preread_bypass_threshold
    raid_disks: int = 0              # md/raid_disks
    sync_action: str = ""            # md/sync_action

    def to_dict(self) -> dict:
        """Convert to the dictionary layout expected by the monitoring templates"""
        return {
            "Level": self.level,
            "ArrayState": self.array_state,
            "Degraded": self.degraded,
            "MaxReadErrors": self.max_read_errors,
            "MetadataVersion": self.metadata_version,
            "MismatchCnt": self.mismatch_cnt,
            "PrereadBypassThreshold": self.preread_bypass_threshold,
            "RaidDisks": self.raid_disks,
            "SyncAction": self.sync_action
        }


@dataclass
class RaidStats:
    """Block device attributes of an array plus its md/ attributes"""

    capability: int = 0              # capability
    dev: str = ""                    # dev (major:minor)
    discard_alignment: int = 0       # discard_alignment
    ext_range: int = 0               # ext_range
    range: int = 0                   # range
    removable: int = 0               # removable
    ro: int = 0                      # ro
    size: int = 0                    # size (512-byte sectors)
    md: Optional[MDStats] = field(default=None)

    def to_dict(self) -> dict:
        """Convert to the dictionary layout expected by the monitoring templates"""
        return {
            "Capability": self.capability,
            "Dev": self.dev,
            "DiscardAlignment": self.discard_alignment,
            "ExtRange": self.ext_range,
            "Range": self.range,
            "Removable": self.removable,
            "RO": self.ro,
            "Size": self.size,
            "MD": self.md.to_dict() if self.md is not None else None
        }
