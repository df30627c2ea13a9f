# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Emit one event to a running Event Gateway.
#
# USAGE:
# ------
#   gateway-emit -n userCreated -d '{"key": "value"}'
#   gateway-emit -n userCreated -p event.yml
#   echo 'hello' | gateway-emit -n greeting -t text/plain
#   python -m gateway_emit -n userCreated -d '{}' -u http://gateway:4000
#
# EXIT CODES:
# -----------
#   0  event emitted
#   1  data could not be resolved or the gateway refused the event
#
# ==============================================

import argparse
import logging
import sys
from typing import List, Optional

from gateway_emit import __version__
from gateway_emit.command import EmitCommand
from gateway_emit.config import get_config
from gateway_emit.errors import EmitError
from gateway_emit.options import EmitOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gateway-emit",
        description="Emits an event to a running Event Gateway",
    )
    parser.add_argument("-n", "--name", required=True, help="Event type")
    parser.add_argument("-p", "--path", help="Path to JSON or YAML file holding input data")
    parser.add_argument("-d", "--data", help="Input data")
    parser.add_argument("-u", "--url", help="Event Gateway address")
    parser.add_argument(
        "-t", "--datatype",
        help="Data type for the input data. By default set to application/json",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> EmitOptions:
    return EmitOptions(
        name=args.name,
        path=args.path,
        data=args.data,
        url=args.url,
        datatype=args.datatype,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()

    level = logging.DEBUG if args.verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        EmitCommand(config=config).run(options_from_args(args))
    except EmitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
