"""Command-line interface for the Verus RPC client."""
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from typing import Any

from pydantic import BaseModel

from .chain_config import ChainIdentity, ConfigResolver
from .client import Client
from .config import AppConfig, load_config
from .errors import VerusRpcError
from .logging_setup import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="vrsc-rpc",
        description="Typed JSON-RPC client for the Verus daemon",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a settings YAML file (default: local daemon config only)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from settings, else INFO)",
    )
    parser.add_argument(
        "--chain",
        default=None,
        help="VRSC, vrsctest or a PBaaS currency id (overrides settings)",
    )
    parser.add_argument(
        "--testnet",
        action="store_true",
        help="Treat --chain as a testnet PBaaS chain",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("resolve", help="Show the resolved RPC user and port")
    sub.add_parser("info", help="Print getblockchaininfo")

    call_parser = sub.add_parser("call", help="Call any RPC method")
    call_parser.add_argument("method", help="RPC method name")
    call_parser.add_argument(
        "params",
        nargs="*",
        help="Positional parameters, parsed as JSON when possible",
    )

    return parser


def parse_param(raw: str) -> Any:
    """Decode a CLI parameter as JSON, falling back to the plain string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_to_jsonable(item) for item in value]
    return value


def _settings(args: argparse.Namespace) -> AppConfig:
    config = load_config(args.config)
    if args.chain:
        config = replace(
            config,
            connection=replace(
                config.connection, chain=args.chain, testnet=args.testnet, url=""
            ),
        )
    return config


def _run(args: argparse.Namespace) -> int:
    """Execute the selected command."""
    config = _settings(args)
    configure_logging(args.log_level or config.logging.level)

    if args.command == "resolve":
        chain = ChainIdentity.from_name(config.connection.chain, config.connection.testnet)
        descriptor = ConfigResolver().resolve(chain)
        print(f"chain:    {chain.name}")
        print(f"user:     {descriptor.user}")
        print("password: ********")
        print(f"port:     {descriptor.port}")
        return 0

    client = Client.from_config(config)
    if args.command == "info":
        result = client.get_blockchain_info()
    else:
        result = client.call(args.method, [parse_param(p) for p in args.params])

    print(json.dumps(_to_jsonable(result), indent=2, default=str))
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        code = _run(args)
    except (VerusRpcError, ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
