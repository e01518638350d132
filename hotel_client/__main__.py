#!/usr/bin/env python3
"""Hotel Mania MCP Server - Module Entry Point.

Allows running the server as: python -m hotel_client
"""

import argparse


def main() -> None:
    """Main entry point for the Hotel Mania MCP server."""
    parser = argparse.ArgumentParser(
        description="Hotel Mania MCP Server",
        prog="hotel-mania-client",
    )

    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information",
    )

    args = parser.parse_args()

    if args.version:
        from hotel_client import __version__

        print(f"Hotel Mania MCP Server v{__version__}")
        return

    from hotel_client.main import main as server_main

    server_main()


if __name__ == "__main__":
    main()
