"""
LocationIQ command line client: reverse geocoding, search and nearby points of interest.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import Any, List, Optional

import lib.utils as utils
from internal.config.manager import ConfigManager
from lib.locationiq import LocationIQClient, LocationIQError
from lib.logging_utils import initLogging

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.WARNING)
# httpx logs request urls, which contain the token
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def createClient(configManager: ConfigManager) -> LocationIQClient:
    """Create LocationIQ client from [locationiq] config section."""
    locationIQConfig = configManager.getLocationIQConfig()
    client = LocationIQClient(
        baseUrl=locationIQConfig.get("base-url", LocationIQClient.API_BASE_URL),
        requestTimeout=locationIQConfig.get("request-timeout", 10),
    )
    client.init(locationIQConfig.get("token"))
    if not client.isInit:
        logger.warning("LocationIQ token is not configured, set [locationiq] token in config")
    return client


async def runCommand(client: LocationIQClient, args: argparse.Namespace) -> Any:
    """Run requested operation, dood!"""
    match args.command:
        case "reverse":
            return await client.reverse(args.latitude, args.longitude)
        case "search":
            return await client.search(args.query)
        case "nearby":
            return await client.nearby(args.latitude, args.longitude, args.tag, args.radius)
        case _:
            raise ValueError(f"Unknown command: {args.command}")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="LocationIQ geocoding client, dood!")
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times), dood!",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit, dood!",
    )

    subparsers = parser.add_subparsers(dest="command")

    reverseParser = subparsers.add_parser("reverse", help="Convert coordinates into address")
    reverseParser.add_argument("latitude")
    reverseParser.add_argument("longitude")

    searchParser = subparsers.add_parser("search", help="Convert address into coordinates")
    searchParser.add_argument("query", nargs="+")

    nearbyParser = subparsers.add_parser("nearby", help="Find points of interest around coordinates")
    nearbyParser.add_argument("latitude")
    nearbyParser.add_argument("longitude")
    nearbyParser.add_argument("tag", help='POI tag, e.g. "restaurant" or "amenity:school"')
    nearbyParser.add_argument("radius", help="Search radius in meters")

    args = parser.parse_args(argv)
    if args.command is None and not args.print_config:
        parser.error("command is required unless --print-config is given")

    if args.command == "search":
        args.query = " ".join(args.query)

    args.config = os.path.abspath(args.config)
    if args.config_dir:
        args.config_dir = [os.path.abspath(dirPath) for dirPath in args.config_dir]

    return args


def prettyPrintConfig(configManager: ConfigManager) -> None:
    """Pretty-print the loaded configuration, hiding the token, dood!"""
    config = dict(configManager.config)
    if config.get("locationiq", {}).get("token"):
        config["locationiq"] = {**config["locationiq"], "token": "***"}
    print(utils.jsonDumps(config, indent=2))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    configManager = ConfigManager(args.config, args.config_dir)

    if args.print_config:
        prettyPrintConfig(configManager)
        return 0

    initLogging(configManager.getLoggingConfig())
    client = createClient(configManager)

    try:
        result = asyncio.run(runCommand(client, args))
    except LocationIQError as e:
        logger.error(f"LocationIQ {args.command} failed: {e}")
        if e.origin is not None:
            logger.debug(f"Error origin: {e.origin!r}")
        return 1

    print(utils.jsonDumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
