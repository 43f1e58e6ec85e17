"""Reading scalar attribute files from sysfs-style directories"""

import logging
import os
import re
from collections import namedtuple
from typing import Dict, Optional

from .exceptions import AttributeParseError, AttributeReadError

STRING = "string"
INTEGER = "integer"

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")

Attribute = namedtuple("Attribute", ["field", "kind"])

# <base>/<device>/<file>
RAID_ATTRIBUTES: Dict[str, Attribute] = {
    "capability": Attribute("capability", INTEGER),
    "dev": Attribute("dev", STRING),
    "discard_alignment": Attribute("discard_alignment", INTEGER),
    "ext_range": Attribute("ext_range", INTEGER),
    "range": Attribute("range", INTEGER),
    "removable": Attribute("removable", INTEGER),
    "ro": Attribute("ro", INTEGER),
    "size": Attribute("size", INTEGER),
}

# <base>/<device>/md/<file>
MD_ATTRIBUTES: Dict[str, Attribute] = {
    "level": Attribute("level", STRING),
    "array_state": Attribute("array_state", STRING),
    "degraded": Attribute("degraded", INTEGER),
    "max_read_errors": Attribute("max_read_errors", INTEGER),
    "metadata_version": Attribute("metadata_version", STRING),
    "mismatch_cnt": Attribute("mismatch_cnt", INTEGER),
    "preread_bypass_threshold": Attribute("preread_bypass_threshold", INTEGER),
    "raid_disks": Attribute("raid_disks", INTEGER),
    "sync_action": Attribute("sync_action", STRING),
}

logger = logging.getLogger(__name__)


def parse_int64(path: str, raw: str) -> int:
    """Parse a base-10 signed 64-bit integer

    Args:
        path: File the value came from, used in error messages
        raw: Stripped file contents

    Returns:
        int: Parsed value

    Raises:
        AttributeParseError: If the value is not a decimal integer or does
            not fit in 64 bits
    """
    if not _INTEGER_RE.match(raw):
        raise AttributeParseError(path, raw)

    value = int(raw, 10)
    if value < INT64_MIN or value > INT64_MAX:
        raise AttributeParseError(path, raw)

    return value


def read_value(path: str, kind: str = STRING):
    """Read a single attribute file

    Args:
        path: Path of the attribute file
        kind: STRING or INTEGER

    Returns:
        Stripped file contents, converted to int for INTEGER attributes

    Raises:
        AttributeReadError: If the file cannot be opened or read
        AttributeParseError: If an INTEGER attribute holds something else
    """
    try:
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            raw = f.read().strip()
    except OSError as e:
        raise AttributeReadError(path, str(e)) from e

    if kind == INTEGER:
        return parse_int64(path, raw)
    return raw


def read_attributes(directory: str, table: Dict[str, Attribute],
                    log: Optional[logging.Logger] = None) -> Dict[str, object]:
    """Read every known attribute present in a directory

    Files listed in the directory but missing from the table are ignored.
    Attributes whose file is not in the listing are left out of the result.

    Args:
        directory: Attribute directory to scan
        table: Mapping of filename to destination field and value kind
        log: Logger instance

    Returns:
        Dict[str, object]: Field name to value for every file found

    Raises:
        AttributeReadError: If the directory or one of its files cannot be read
        AttributeParseError: If an integer attribute cannot be parsed
    """
    log = log or logger

    try:
        names = os.listdir(directory)
    except OSError as e:
        raise AttributeReadError(directory, str(e)) from e

    log.debug(f"Scanning {len(names)} entries in {directory}")

    values = {}
    for name in names:
        attribute = table.get(name)
        if attribute is None:
            continue

        path = os.path.join(directory, name)
        values[attribute.field] = read_value(path, attribute.kind)
        log.debug(f"{path} = {values[attribute.field]!r}")

    return values
