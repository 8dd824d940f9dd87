"""
Entry and dictionary info commands: show, stats, reload.
"""

import sys
from rich import print_json

from nordum.cli import client
from nordum.cli.backend import get_backend


def add_subparser(subparsers):
    show_p = subparsers.add_parser("show", help="Show one entry")
    show_p.add_argument("key", help="Entry key")
    show_p.set_defaults(func=run_show)

    stats_p = subparsers.add_parser("stats", help="Dictionary coverage")
    stats_p.set_defaults(func=run_stats)

    reload_p = subparsers.add_parser("reload", help="Make the running server reload its dictionary")
    reload_p.set_defaults(func=run_reload)


def run_show(args):
    try:
        entry = get_backend(args).get_entry(args.key)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if args.json:
        print_json(data=entry)
        return

    print(f"Nordum: {entry['nordum']}")
    print(f"English: {entry['english']}")
    print(f"Part of speech: {entry['pos']}")
    if entry.get("gender"):
        print(f"Gender: {entry['gender']}")
    print(f"Frequency: {entry['frequency']}")
    if entry["sources"]:
        print("Sources:")
        for lang, word in entry["sources"].items():
            print(f"  {lang:12} {word}")


def run_stats(args):
    try:
        stats = get_backend(args).stats()
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if args.json:
        print_json(data=stats)
        return

    meta = stats["metadata"]
    counts = stats["counts"]
    print(f"Entries: {counts['total']}")
    if meta.get("generated"):
        print(f"Generated: {meta['generated']}")
    if meta.get("languages"):
        print(f"Languages: {', '.join(meta['languages'])}")
    print(f"  nouns: {counts['noun']}")
    print(f"  verbs: {counts['verb']}")
    print(f"  adjectives: {counts['adjective']}")
    print(f"  other: {counts['other']}")
    print(f"Letters: {' '.join(stats['letters'])}")


def run_reload(args):
    try:
        result = client.reload()
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if args.json:
        print_json(data=result)
        return

    print("✓ Reloaded")
    print(f"Entries: {result['entry_count']}")
