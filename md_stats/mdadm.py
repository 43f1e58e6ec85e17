"""Discovery and statistics for Linux software RAID arrays"""

import fnmatch
import logging
import os
from dataclasses import replace
from typing import List, Optional

from .exceptions import DeviceListError
from .models import MdDevice, MDStats, RaidStats
from .sysfs import MD_ATTRIBUTES, RAID_ATTRIBUTES, read_attributes

DEFAULT_SYSTEM_PATH = "/sys/block"
MD_DEVICE_PATTERN = "md[0-9]*"
MD_SUBDIR = "md"


class MdadmReader:
    """Reads md array information from the block device directory"""

    def __init__(self, system_path: str = DEFAULT_SYSTEM_PATH, logger: Optional[logging.Logger] = None):
        """Initialize the reader

        Args:
            system_path: Directory holding one entry per block device
            logger: Logger instance
        """
        self.system_path = system_path
        self.logger = logger or logging.getLogger(__name__)

    def list_devices(self) -> List[str]:
        """Get names of all md arrays

        Returns:
            List[str]: Sorted device names (e.g., ['md0', 'md127'])

        Raises:
            DeviceListError: If the block device directory cannot be listed
        """
        self.logger.debug(f"Looking for md devices in {self.system_path}")

        if not os.path.exists(self.system_path):
            raise DeviceListError(self.system_path, "directory does not exist")

        try:
            entries = os.listdir(self.system_path)
        except OSError as e:
            raise DeviceListError(self.system_path, str(e)) from e

        names = sorted(
            entry for entry in entries
            if fnmatch.fnmatchcase(entry, MD_DEVICE_PATTERN)
        )

        self.logger.debug(f"Found {len(names)} md devices: {', '.join(names)}")
        return names

    def devices(self) -> List[MdDevice]:
        """Get all md arrays as device objects"""
        return [MdDevice(name=name) for name in self.list_devices()]

    def find_device(self, name: str) -> Optional[MdDevice]:
        """Find an md array by name

        Args:
            name: Device name (e.g., md0)

        Returns:
            MdDevice if found, None otherwise
        """
        for device in self.devices():
            if device.name == name:
                return device
        return None

    def raid_stats(self, device: MdDevice) -> RaidStats:
        """Read block device level attributes of an array"""
        directory = os.path.join(self.system_path, device.name)
        return RaidStats(**read_attributes(directory, RAID_ATTRIBUTES, self.logger))

    def md_stats(self, device: MdDevice) -> MDStats:
        """Read attributes from the md/ subdirectory of an array"""
        directory = os.path.join(self.system_path, device.name, MD_SUBDIR)
        return MDStats(**read_attributes(directory, MD_ATTRIBUTES, self.logger))

    def stats(self, name: str) -> Optional[RaidStats]:
        """Collect the full statistics record for one array

        Args:
            name: Device name (e.g., md0)

        Returns:
            RaidStats with embedded MDStats, or None if no such array exists

        Raises:
            DeviceListError: If the block device directory cannot be listed
            AttributeReadError: If any attribute cannot be read
            AttributeParseError: If any integer attribute cannot be parsed
        """
        device = self.find_device(name)
        if device is None:
            self.logger.debug(f"Device {name} not found in {self.system_path}")
            return None

        raid = self.raid_stats(device)
        return replace(raid, md=self.md_stats(device))
