"""Main MdStats class - command line entry point"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import ConfigManager
from .exceptions import MdStatsError
from .mdadm import DEFAULT_SYSTEM_PATH, MdadmReader

COMMANDS_HINT = "[discovery, stats] - required one command"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


class MdStats:
    """Main class for the md-stats tool

    Discovers software RAID arrays and prints their state as JSON for a
    monitoring agent:
    - discovery: one {"{#MD.NAME}": ...} entry per array
    - stats: block device and md/ attributes of one array
    """

    def __init__(self):
        """Initialize the MdStats instance"""
        # Options
        self.command = None
        self.device_name = None
        self.config_file = None
        self.system_path = None
        self.pretty = False
        self.verbose = False
        self.quiet = False

        # Components (initialized later)
        self.logger = self._setup_logger()
        self.config_manager: Optional[ConfigManager] = None
        self.reader: Optional[MdadmReader] = None

        self.parser = self._build_parser()

    def _setup_logger(self) -> logging.Logger:
        """Set up the logger for the application"""
        logger = logging.getLogger("md-stats")
        logger.setLevel(logging.WARNING)

        for handler in list(logger.handlers):
            logger.removeHandler(handler)

        ch = logging.StreamHandler()
        ch.setLevel(logging.DEBUG)

        formatter = logging.Formatter('[%(levelname)s] %(message)s')
        ch.setFormatter(formatter)

        logger.addHandler(ch)

        return logger

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = _ArgumentParser(
            prog="md-stats",
            description="Discovers Linux software RAID arrays and reports their state as JSON."
        )

        parser.add_argument("-c", "--config", metavar="FILE",
                          help="YAML configuration file (default: none)")
        parser.add_argument("--system-path", metavar="PATH",
                          help="Block device directory (default: /sys/block)")
        parser.add_argument("--pretty", action="store_true", help="Indent JSON output")
        verbosity = parser.add_mutually_exclusive_group()
        verbosity.add_argument("-v", "--verbose", action="store_true", help="Enable debug output")
        verbosity.add_argument("-q", "--quiet", action="store_true", help="Only report errors")

        subparsers = parser.add_subparsers(dest="command", parser_class=_ArgumentParser)
        subparsers.add_parser("discovery", help="List md arrays for low-level discovery")
        self.stats_parser = subparsers.add_parser("stats", help="Show attributes of one md array")
        self.stats_parser.add_argument("-name", "--name", dest="name", default="", metavar="NAME",
                                     help='Device "name" to get stats (Required)')

        return parser

    def parse_arguments(self, argv: Optional[List[str]] = None) -> None:
        """Parse command line arguments"""
        args = self.parser.parse_args(argv)

        self.command = args.command
        self.device_name = getattr(args, "name", None)
        self.config_file = args.config
        self.system_path = args.system_path
        self.pretty = args.pretty
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            self._set_log_level("DEBUG")
        elif self.quiet:
            self._set_log_level("ERROR")

    def _set_log_level(self, level: str) -> None:
        self.logger.setLevel(getattr(logging, level))

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Main entry point for the application

        Returns:
            int: Process exit status
        """
        self.parse_arguments(argv)

        if self.command is None:
            print(COMMANDS_HINT)
            return 1

        if self.command == "stats" and not self.device_name:
            self.stats_parser.print_help(sys.stderr)
            return 0

        try:
            self._load_configuration()

            if self.command == "discovery":
                self._handle_discovery()
            elif self.command == "stats":
                self._handle_stats()
        except MdStatsError as e:
            self.logger.error(str(e))
            return 1

        return 0

    def _load_configuration(self) -> None:
        """Load configuration and create the reader

        A configuration file is only read when one is given with -c.
        Command line options take precedence over the configuration file.
        """
        if self.config_file is not None:
            self.config_manager = ConfigManager(self.config_file, logger=self.logger)

            if self.config_manager.log_level and not (self.verbose or self.quiet):
                self._set_log_level(self.config_manager.log_level)

            if self.system_path is None:
                self.system_path = self.config_manager.system_path
            self.pretty = self.pretty or self.config_manager.pretty

        if self.system_path is None:
            self.system_path = DEFAULT_SYSTEM_PATH

        self.reader = MdadmReader(self.system_path, logger=self.logger)

    def _dumps(self, data) -> str:
        if self.pretty:
            return json.dumps(data, indent=2)
        return json.dumps(data, separators=(",", ":"))

    def _handle_discovery(self) -> None:
        """Print one discovery entry per md array"""
        devices = self.reader.devices()
        self.logger.info(f"Discovered {len(devices)} md devices")
        print(self._dumps([device.to_discovery() for device in devices]))

    def _handle_stats(self) -> None:
        """Print the statistics record of the requested array

        Nothing is printed when the array does not exist.
        """
        stats = self.reader.stats(self.device_name)
        if stats is None:
            self.logger.info(f"No md device named {self.device_name}")
            return

        sys.stdout.write(self._dumps(stats.to_dict()))
        sys.stdout.flush()


def main(argv: Optional[List[str]] = None) -> int:
    """Console script entry point"""
    try:
        return MdStats().run(argv)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 1
