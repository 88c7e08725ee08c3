#!/usr/bin/env python3
"""
Key Light Air Adapter - exposes an Elgato Key Light Air to a smart-home gateway
as on/off, brightness and color temperature properties
"""

__version__ = "1.0.0"
__license__ = "MPL-2.0"

import argparse
import asyncio
import logging
import sys
from typing import Any, Optional

import aiohttp

from config import AddonConfig
from core.adapter import KEY_LIGHT_AIR_ID, KeyLightAdapter
from core.errors import KeyLightError
from core.host import AddonManager, LoggingAddonManager
from core.property import parse_bool
from core.service import KeyLightService

logger = logging.getLogger(__name__)


def load(manager: AddonManager, config: Optional[AddonConfig] = None) -> KeyLightAdapter:
    """Entry point the gateway calls to start the add-on"""
    config = config or AddonConfig()
    return KeyLightAdapter(manager, config.addon_id, KeyLightService(config.light))


def parse_value(name: str, raw: str) -> Any:
    try:
        if name == "on":
            return parse_bool(raw)
        return int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid value for {name}: {raw}") from None


async def set_property(adapter: KeyLightAdapter, name: str, value: Any) -> Any:
    device = adapter.get_device(KEY_LIGHT_AIR_ID)
    return await device.set_property(name, value)


def main(argv: Optional[list] = None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(description='Key Light Air Adapter')
    parser.add_argument('--version', action='version', version=f'Key Light Air Adapter {__version__}')
    parser.add_argument('--debug', action='store_true', help='Enable debug output')
    parser.add_argument('--config', help='Path to a settings.json file')
    parser.add_argument('--manifest', help='Path to the add-on manifest.json')
    parser.add_argument('property', choices=['on', 'brightness', 'temperature'])
    parser.add_argument('value')
    args = parser.parse_args(argv)

    config = AddonConfig(manifest_path=args.manifest, settings_path=args.config)
    debug = args.debug or config.advanced.enable_debug_logging
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        value = parse_value(args.property, args.value)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    adapter = load(LoggingAddonManager(), config)
    try:
        accepted = asyncio.run(set_property(adapter, args.property, value))
    except (aiohttp.ClientError, asyncio.TimeoutError, KeyLightError) as e:
        logger.error("Setting %s failed: %s", args.property, e)
        return 1
    logger.info("%s set to %r", args.property, accepted)
    return 0


if __name__ == "__main__":
    sys.exit(main())
