"""CLI entry point: python -m studiosim.mcp <store_path> [--config path.json]"""

from __future__ import annotations

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="python -m studiosim.mcp",
        description="Serve studiosim channels over MCP (stdio)",
    )
    parser.add_argument("store_path", help="JSON file holding the channels")
    parser.add_argument("--config", default=None, help="JSON file overriding tunables")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (stderr)")
    args = parser.parse_args(argv)

    # stdout carries the protocol
    logging.basicConfig(stream=sys.stderr, level=args.log_level.upper())

    from studiosim.cli import load_config
    from studiosim.mcp.server import create_server
    from studiosim.storage import ChannelStore

    config = load_config(args.config)
    store = ChannelStore(args.store_path, config=config)
    server = create_server(store, config=config, seed=args.seed)
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
