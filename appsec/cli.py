"""
Selected Hostnames CLI

Lists and replaces the hostnames a security configuration version protects.

Usage:
    selected-hostnames list --config-id 12345 --version 7
    selected-hostnames get --config-id 12345 --version 7 --format table
    selected-hostnames update --config-id 12345 --version 7 --hostnames a.com,b.com
    selected-hostnames update --config-id 12345 --version 7 --hostnames-file hosts.txt
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import ApiConfig, load_environment, setup_logging, validate_config
from .errors import APIError, AppsecError, ValidationError
from .formatters import HostnameFormatter
from .models import (
    GetSelectedHostnamesRequest,
    GetSelectedHostnameRequest,
    UpdateSelectedHostnameRequest,
)
from .parsers import HostnameParser
from .services import HostnameConfigClient
from .session import Executor

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="selected-hostnames",
        description="List or replace the selected hostnames of an appsec configuration version",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List hostnames of config 12345, version 7
  selected-hostnames list --config-id 12345 --version 7

  # Show results as JSON
  selected-hostnames list --config-id 12345 --version 7 --json

  # Replace the hostname list
  selected-hostnames update --config-id 12345 --version 7 --hostnames a.com,b.com

  # Replace from a file (one hostname per line)
  selected-hostnames update --config-id 12345 --version 7 --hostnames-file hosts.txt
        """
    )

    parser.add_argument(
        "command",
        choices=["list", "get", "update"],
        help="Operation to run"
    )

    parser.add_argument(
        "--config-id", "-c",
        type=int,
        required=True,
        help="Security configuration ID"
    )

    parser.add_argument(
        "--version", "-V",
        type=int,
        required=True,
        help="Configuration version"
    )

    parser.add_argument(
        "--hostnames", "-n",
        help="Comma-separated hostnames to select (update only)"
    )

    parser.add_argument(
        "--hostnames-file",
        help="File with one hostname per line (update only)"
    )

    parser.add_argument(
        "--format", "-f",
        choices=list(HostnameFormatter.FORMATS),
        default="list",
        help="Output format: list (default), table, or json"
    )

    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Shortcut for --format json"
    )

    parser.add_argument(
        "--base-url",
        help="API base URL (overrides APPSEC_BASE_URL / APPSEC_HOST)"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--log-file",
        help="Also write log records to this file"
    )

    return parser


def _collect_hostnames(args: argparse.Namespace) -> List[str]:
    names = HostnameParser.split(args.hostnames)
    if args.hostnames_file:
        names.extend(HostnameParser.read_file(args.hostnames_file))
    return names


def run(args: argparse.Namespace, client: HostnameConfigClient) -> int:
    """Run one command against a client and print the result"""
    if args.command == "update":
        if args.hostnames is None and not args.hostnames_file:
            print("update needs --hostnames or --hostnames-file", file=sys.stderr)
            return EXIT_USAGE
        hostnames = HostnameParser.parse(_collect_hostnames(args))
        response = client.update_selected_hostname(UpdateSelectedHostnameRequest(
            config_id=args.config_id,
            version=args.version,
            hostname_list=hostnames,
        ))
    elif args.command == "get":
        response = client.get_selected_hostname(GetSelectedHostnameRequest(
            config_id=args.config_id,
            version=args.version,
        ))
    else:
        response = client.get_selected_hostnames(GetSelectedHostnamesRequest(
            config_id=args.config_id,
            version=args.version,
        ))

    output_format = "json" if args.json else args.format
    formatter = HostnameFormatter(output_format=output_format)
    print(formatter.format(response, args.config_id, args.version))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        setup_logging(verbose=args.verbose, log_file=args.log_file)
    except OSError as e:
        print(f"\n❌ Cannot open log file: {e}", file=sys.stderr)
        return EXIT_USAGE

    load_environment(args.env_file)

    try:
        config = ApiConfig.from_env()
        if args.base_url:
            config.base_url = args.base_url
        validate_config(config)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"\n❌ {e}", file=sys.stderr)
        return EXIT_ERROR

    with Executor(config.base_url, timeout=config.timeout, verify_ssl=config.verify_ssl) as executor:
        client = HostnameConfigClient(executor)
        try:
            return run(args, client)
        except ValidationError as e:
            print(f"\n❌ {e}", file=sys.stderr)
            return EXIT_USAGE
        except APIError as e:
            logger.debug(f"API error payload: {e.payload}")
            print(f"\n❌ {e}", file=sys.stderr)
            return EXIT_ERROR
        except AppsecError as e:
            logger.error(f"Request failed: {e}", exc_info=args.verbose)
            print(f"\n❌ {e}", file=sys.stderr)
            return EXIT_ERROR
        except (OSError, UnicodeDecodeError) as e:
            print(f"\n❌ Cannot read hostnames file: {e}", file=sys.stderr)
            return EXIT_USAGE


def entrypoint():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)
