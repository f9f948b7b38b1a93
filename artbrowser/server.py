import argparse

import uvicorn

from .core.config import LOG_LEVELS, get_log_level, get_server_defaults
from .core.logger import setup_logger
from .core.server import load_env


def parse_args(argv=None):
    load_env()
    host, port = get_server_defaults()
    parser = argparse.ArgumentParser(description="Art collection browser")
    parser.add_argument("--port", type=int, default=port, help=f"Server port (default: {port})")
    parser.add_argument("--host", default=host, help=f"Server host (default: {host})")
    parser.add_argument(
        "--log-level",
        default=get_log_level(),
        choices=list(LOG_LEVELS),
        help="Logging level (default: ART_BROWSER_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logger("artbrowser", level=args.log_level)
    uvicorn.run(
        "artbrowser.core.server:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
