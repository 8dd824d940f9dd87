"""
Spell check text or a file.
"""

import sys
from pathlib import Path
from rich import print_json
from rich.console import Console

from nordum.cli.backend import get_backend
from nordum.core.tokenize import tokenize

console = Console()


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def add_subparser(subparsers):
    parser = subparsers.add_parser("check", help="Spell check text")
    parser.add_argument("text", nargs="?", help="Text to check")
    parser.add_argument("--file", help="Read text from a file instead")
    parser.set_defaults(func=run)


def read_text(args) -> str:
    if args.file:
        path = Path(args.file)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {args.file}")
        return path.read_text(encoding="utf-8")
    if args.text is None:
        raise ValueError("Give TEXT or --file")
    return args.text


def first_positions(text: str) -> dict[str, int]:
    positions = {}
    for token in tokenize(text):
        positions.setdefault(token.text.lower(), token.position)
    return positions


def run(args):
    try:
        text = read_text(args)
        result = get_backend(args).spell_check(text)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if args.json:
        print_json(data=result)
        return

    stats = result["stats"]
    console.print(
        f"[dim]{plural(stats['words'], 'word')}, "
        f"{plural(stats['characters'], 'character')}, "
        f"{plural(stats['sentences'], 'sentence')}[/dim]"
    )

    errors = result["errors"]
    if not errors:
        console.print("[green]✓ No unknown words[/green]")
        return

    positions = first_positions(text)
    for error in errors:
        suggestions = ", ".join(error["suggestions"]) or "no suggestions"
        pos = positions.get(error["word"], 0)
        console.print(f"[red]✗[/red] {pos:4d}: {error['word']} → {suggestions}")
