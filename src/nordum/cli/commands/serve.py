"""
Run the API server.
"""

import os

from nordum import config


def add_subparser(subparsers):
    defaults = config.Settings()
    parser = subparsers.add_parser("serve", help="Run the HTTP API")
    parser.add_argument("--host", default=None, help=f"Bind host (default: {defaults.host})")
    parser.add_argument("--port", type=int, default=None, help=f"Bind port (default: {defaults.port})")
    parser.set_defaults(func=run)


def run(args):
    import uvicorn

    if args.dict:
        os.environ["NORDUM_DICTIONARY"] = args.dict

    settings = config.get_settings()
    uvicorn.run(
        "nordum.server.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
    )
