"""
randseq CLI: Command-line interface for sequence generation.

Provides commands for:
- generate: Draw a sequence and print it
- distributions: List supported distributions
- serve: Run the HTTP API
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from randseq.config import ServiceConfig
from randseq.response import error_details
from randseq.service import SequenceService
from randseq.types import SampleRequest

EXIT_SERVER_ERROR = 1
EXIT_CLIENT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="randseq",
        description="randseq: pseudo-random sequences from statistical distributions",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Path to a .randseq.toml file (default: search upward from cwd)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # generate
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a pseudo-random sequence",
    )
    generate_parser.add_argument(
        "--count", "-n",
        type=int,
        help="Number of samples (default: from config, 10)",
    )
    generate_parser.add_argument(
        "--type", "-t",
        dest="source_type",
        help="Generator type: general or secure (default: from config, general)",
    )
    generate_parser.add_argument(
        "--distribution", "-d",
        help="Distribution name (default: from config, uniform)",
    )
    generate_parser.add_argument(
        "--param1",
        type=float,
        help="First distribution parameter (default: distribution-specific)",
    )
    generate_parser.add_argument(
        "--param2",
        type=float,
        help="Second distribution parameter (default: distribution-specific)",
    )
    generate_parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output as JSON",
    )

    # distributions
    distributions_parser = subparsers.add_parser(
        "distributions",
        help="List supported distributions",
    )
    distributions_parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output as JSON",
    )

    # serve
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API (requires randseq[api])",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Bind address (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=8080,
        help="Port (default: 8080)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = ServiceConfig.load(path=args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_CLIENT_ERROR

    service = SequenceService(config)

    if args.command == "generate":
        return handle_generate(args, service)
    elif args.command == "distributions":
        return handle_distributions(args, service)
    elif args.command == "serve":
        return handle_serve(args, service)
    return 0


def handle_generate(args: argparse.Namespace, service: SequenceService) -> int:
    """Handle the generate command."""
    config = service.config
    request = SampleRequest(
        count=args.count if args.count is not None else config.default_count,
        source_type=args.source_type or config.default_type,
        distribution=args.distribution or config.default_distribution,
        param1=args.param1,
        param2=args.param2,
    )

    try:
        result = service.run(request)
    except Exception as e:  # noqa: BLE001
        err = error_details(e)
        if args.json_output:
            print(json.dumps(err.to_dict(), indent=2), file=sys.stderr)
        else:
            print(f"Error: {err.message}", file=sys.stderr)
        return EXIT_CLIENT_ERROR if err.is_client_error else EXIT_SERVER_ERROR

    if args.json_output:
        print(json.dumps(result.to_dict(json_safe=True)))
    else:
        from randseq.display import display_sequence

        display_sequence(result)
    return 0


def handle_distributions(args: argparse.Namespace, service: SequenceService) -> int:
    """Handle the distributions command."""
    catalog = service.registry.describe()
    if args.json_output:
        print(json.dumps(catalog, indent=2))
    else:
        from randseq.display import display_distributions

        display_distributions(catalog)
    return 0


def handle_serve(args: argparse.Namespace, service: SequenceService) -> int:
    """Handle the serve command."""
    try:
        import uvicorn

        from randseq.api import create_app
    except ImportError:
        print(
            "Error: the HTTP API requires the api extra. "
            "Install it with: pip install randseq[api]",
            file=sys.stderr,
        )
        return EXIT_SERVER_ERROR

    uvicorn.run(create_app(service), host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
