"""
Lookup commands: search, letter.
"""

import sys
from rich import print_json

from nordum.cli.backend import get_backend
from nordum.core.search import SearchFilter


def add_subparser(subparsers):
    search_p = subparsers.add_parser("search", help="Search the dictionary")
    search_p.add_argument("query", help="Substring to look for")
    search_p.add_argument(
        "--filter", "-f",
        choices=SearchFilter.names(),
        default="all",
        help="Fields to match (default: all)",
    )
    search_p.set_defaults(func=run_search)

    letter_p = subparsers.add_parser("letter", help="List words by starting letter")
    letter_p.add_argument("letter", help="Starting letter")
    letter_p.set_defaults(func=run_letter)


def format_entry(entry: dict) -> str:
    line = f"{entry['nordum']:20} {entry['english']:25} {entry['pos']}"
    if entry.get("gender"):
        line += f" ({entry['gender']})"
    return line


def print_entries(entries: list[dict], as_json: bool, empty: str):
    if as_json:
        print_json(data=entries)
        return
    if not entries:
        print(empty)
        return
    for entry in entries:
        print(format_entry(entry))


def run_search(args):
    try:
        results = get_backend(args).search(args.query, args.filter)
        print_entries(results, args.json, f"No matches for '{args.query}'.")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def run_letter(args):
    try:
        results = get_backend(args).words_by_letter(args.letter)
        print_entries(results, args.json, f"No words starting with '{args.letter}'.")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
