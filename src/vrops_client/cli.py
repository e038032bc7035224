#!/usr/bin/env python3
"""
vROps Resource Listing Utility

Queries the resource listing endpoint and prints the matching resources.

Usage:
    vrops-resources --server vrops.example.com --token $TOKEN --resource-kind VirtualMachine
    vrops-resources --resource-kind VirtualMachine --resource-kind HostSystem --include-related CHILD
    vrops-resources --format xml --output-file resources.xml --page 0 --page-size 100
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import ClientConfig, ResponseFormat
from .query.params import RelationKind
from .resources import get_resources
from .runtime.errors import VropsError

logger = logging.getLogger(__name__)

SECRETS_WARNING = (
    "Verbose output is enabled; request details printed by other tools or "
    "handlers may include authentication tokens."
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vrops-resources",
        description="List resources from a vRealize Operations server",
    )
    parser.add_argument("--server", help="Server hostname (default: $VROPS_SERVER)")
    parser.add_argument("--token", help="Authentication token (default: $VROPS_TOKEN)")
    parser.add_argument("--format", dest="response_format", choices=[f.value for f in ResponseFormat],
                        default=ResponseFormat.JSON.value, help="Response format")
    parser.add_argument("--output-file", help="Also write the raw response to this file")
    parser.add_argument("--page", type=int, help="Page index (starts at 0)")
    parser.add_argument("--page-size", type=int, help="Results per page")
    parser.add_argument("--name", action="append", help="Resource name (repeatable)")
    parser.add_argument("--regex", action="append", help="Resource name regular expression (repeatable)")
    parser.add_argument("--resource-kind", action="append", help="Resource kind key (repeatable)")
    parser.add_argument("--adapter-kind", action="append", help="Adapter kind key (repeatable)")
    parser.add_argument("--include-related", choices=[r.value for r in RelationKind],
                        help="Also return PARENT or CHILD relation identifiers")
    parser.add_argument("--resource-id", action="append", help="Resource identifier (repeatable)")
    parser.add_argument("--encode", action="store_true", help="Percent-encode query values")
    parser.add_argument("--insecure", action="store_true", help="Skip TLS certificate verification")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.verbose:
        logger.warning(SECRETS_WARNING)

    try:
        config = ClientConfig.from_env(
            server=args.server,
            token=args.token,
            response_format=args.response_format,
            verify_ssl=False if args.insecure else None,
        )
        result = get_resources(
            config=config,
            output_file=args.output_file,
            page=args.page,
            page_size=args.page_size,
            name=args.name,
            regex=args.regex,
            resource_kind=args.resource_kind,
            adapter_kind=args.adapter_kind,
            include_related=args.include_related,
            resource_id=args.resource_id,
            encode=args.encode,
        )
    except VropsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if config.response_format is ResponseFormat.XML:
        print(result)
    else:
        print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
