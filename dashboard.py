#!/usr/bin/env python3
"""Galaxy Dashboard - Main entry point.

Generates a procedural galaxy and shows it in a terminal dashboard, serves
it over HTTP, or prints it as JSON.
"""

import argparse
import json
import logging
import sys

from src.engine.errors import GalaxyConfigError
from src.server.config import ServerSettings
from src.server.session import GalaxyStore
from src.utils.serialization import serialize_galaxy


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Galaxy Dashboard - procedural galaxy with idle resource accrual",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              # Terminal dashboard, 4 solar systems
  %(prog)s --systems 8 --seed 42        # Reproducible 8-system galaxy
  %(prog)s --mode serve --port 3000     # HTTP API
  %(prog)s --mode json --systems 1      # Print a galaxy as JSON
        """,
    )

    parser.add_argument(
        "--mode",
        choices=["tui", "serve", "json"],
        default="tui",
        help="tui=terminal dashboard, serve=HTTP API, json=print galaxy (default: tui)",
    )
    parser.add_argument(
        "--systems",
        type=int,
        default=None,
        help="Number of solar systems (default: GALAXY_SOLAR_SYSTEMS or 4)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for galaxy generation (default: GALAXY_SEED or random)",
    )
    parser.add_argument("--host", type=str, default=None, help="Server host (serve mode)")
    parser.add_argument("--port", type=int, default=None, help="Server port (serve mode)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    try:
        settings = ServerSettings.from_env()
    except GalaxyConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    # CLI flags override environment
    if args.systems is not None:
        settings.solar_system_count = args.systems
    if args.seed is not None:
        settings.seed = args.seed
    if args.host is not None:
        settings.host = args.host
    if args.port is not None:
        settings.port = args.port
    if args.debug:
        settings.log_level = "DEBUG"

    if args.mode == "tui":
        # Keep log output out of the terminal the dashboard draws on
        from textual.logging import TextualHandler

        handlers = [TextualHandler()]
    else:
        handlers = [logging.StreamHandler(sys.stderr)]
    logging.basicConfig(
        level=settings.log_level,
        format="[%(levelname)s] %(message)s",
        handlers=handlers,
    )

    try:
        store = GalaxyStore(settings.galaxy_config())
    except GalaxyConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.mode == "json":
        print(json.dumps(serialize_galaxy(store.get_galaxy()), indent=2))
    elif args.mode == "serve":
        import uvicorn

        from src.server.main import create_app

        app = create_app(settings=settings, store=store)
        uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")
    else:
        from src.interface.tui_app import GalaxyDashboardTUI

        GalaxyDashboardTUI(store).run()


if __name__ == "__main__":
    main()
