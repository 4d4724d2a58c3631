#!/usr/bin/env python3
"""Serve the type provider over HTTP.

Usage: python scripts/serve.py [--config config.yaml] [--host HOST] [--port PORT]
"""
import argparse
import logging

from type_provider.config import load_config, merge_config
from type_provider.logging_utils import configure_logging
from type_provider.provider import new
from type_provider.server import create_app

logger = logging.getLogger("serve")


def main(argv=None):
    p = argparse.ArgumentParser(description="Serve the type provider over HTTP")
    p.add_argument("--config", help="Path to config.yaml")
    p.add_argument("--host")
    p.add_argument("--port", type=int)
    args = p.parse_args(argv)

    cfg = merge_config(load_config(args.config))
    configure_logging(cfg["log_level"])
    host = args.host or cfg["host"]
    port = args.port or cfg["port"]

    provider = new(cfg["version"])()
    app = create_app(provider)
    logger.info("serving provider %s (%s) on %s:%d", provider.type_name, provider.version, host, port)
    app.run(host=host, port=port)


if __name__ == '__main__':
    main()
