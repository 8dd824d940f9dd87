"""
Nordum CLI.
"""

import argparse
from nordum.cli.commands import check, search, serve, show


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nordum", description="Nordum dictionary and spell checker")
    parser.add_argument("--dict", help="Path to dictionary.json (local mode)")
    parser.add_argument("--remote", action="store_true", help="Query the HTTP API instead of a local file")
    parser.add_argument("--json", action="store_true", help="Print raw JSON")
    subparsers = parser.add_subparsers(dest="command")
    
    search.add_subparser(subparsers)
    check.add_subparser(subparsers)
    show.add_subparser(subparsers)
    serve.add_subparser(subparsers)
    
    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
