"""
md-stats

This module discovers Linux software RAID (md) arrays and reports their
state as JSON for low-level discovery in a monitoring system.
"""

from .mdadm import MdadmReader
from .models import MdDevice, MDStats, RaidStats
from .md_stats import MdStats, main

__version__ = "1.0.0"
__all__ = ["MdadmReader", "MdDevice", "MDStats", "RaidStats", "MdStats", "main"]
