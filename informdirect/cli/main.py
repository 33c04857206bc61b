#!/usr/bin/env python
"""Inform Direct CLI.

Usage:
    informdirect authenticate
    informdirect list-companies
    informdirect get-company -c <number>
    informdirect add-company -c <number> [-a <code>]
    informdirect remove-company -c <number> [--save-registers] [--save-documents]

Targets the sandbox API unless --production is given.
"""

from __future__ import annotations

import argparse
import logging
import sys

from informdirect.client import InformDirectClient
from informdirect.config import ClientSettings, ConfigError
from informdirect.errors import InformDirectError
from informdirect.models import Environment

from . import commands

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="informdirect", description="Inform Direct Integration API client"
    )
    parser.add_argument("--base-url", default=None, help="Override API base URL")
    env_group = parser.add_mutually_exclusive_group()
    env_group.add_argument(
        "--sandbox",
        action="store_true",
        help="Use $INFORM_DIRECT_SANDBOX_API_KEY instead of $INFORM_DIRECT_API_KEY",
    )
    env_group.add_argument(
        "--production",
        action="store_true",
        help="Use the production API (default: sandbox)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.add_parser("authenticate", help="Test authentication")
    sub.add_parser("list-companies", help="List all companies in portfolio")

    get_p = sub.add_parser("get-company", help="Get a single company")
    get_p.add_argument("-c", "--company", required=True, help="Company number")

    add_p = sub.add_parser("add-company", help="Add a company")
    add_p.add_argument("-c", "--company", required=True, help="Company number")
    add_p.add_argument("-a", "--auth-code", dest="auth_code", default=None, help="Authentication code")

    rm_p = sub.add_parser("remove-company", help="Remove a company")
    rm_p.add_argument("-c", "--company", required=True, help="Company number")
    rm_p.add_argument(
        "--save-registers", action="store_true", default=None, help="Save registers on removal"
    )
    rm_p.add_argument(
        "--save-documents", action="store_true", default=None, help="Save documents on removal"
    )
    return parser


def run(args: argparse.Namespace, client: InformDirectClient) -> int:
    if args.command == "authenticate":
        return commands.authenticate(client)
    if args.command == "list-companies":
        return commands.list_companies(client)
    if args.command == "get-company":
        return commands.get_company(client, args.company)
    if args.command == "add-company":
        return commands.add_company(client, args.company, args.auth_code)
    if args.command == "remove-company":
        return commands.remove_company(
            client,
            args.company,
            save_registers=args.save_registers,
            save_documents=args.save_documents,
        )
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    try:
        settings = ClientSettings.from_env(
            sandbox=args.sandbox,
            base_url=args.base_url,
            environment=Environment.PRODUCTION if args.production else Environment.SANDBOX,
        )
        client = InformDirectClient.from_settings(settings)
        return run(args, client)
    except (ConfigError, InformDirectError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
