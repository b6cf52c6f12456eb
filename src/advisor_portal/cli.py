"""Command line entry point for the Advisor Portal."""

import argparse
import getpass
import sys

from loguru import logger

from .config import settings


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at the given level."""
    try:
        logger.remove(0)
    except ValueError:
        pass  # Handler already removed
    logger.add(sys.stderr, level=level.upper())


def serve(args) -> int:
    """Run the API server."""
    from .main import run

    configure_logging(args.log_level)
    run(host=args.host, port=args.port, reload=args.reload)
    return 0


def hash_password_command(args) -> int:
    """Print a bcrypt hash for a password read from the terminal."""
    from .core.security import hash_password

    password = getpass.getpass("Password: ")
    if password != getpass.getpass("Confirm password: "):
        print("Error: Passwords do not match", file=sys.stderr)
        return 1

    print(hash_password(password))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Advisor Portal server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Serve
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default=settings.API_HOST, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=settings.API_PORT, help="Bind port")
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        default=settings.API_RELOAD,
        help="Reload on code changes",
    )
    serve_parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Log level")
    serve_parser.set_defaults(func=serve)

    # Hash password
    hash_parser = subparsers.add_parser("hash-password", help="Hash a password with bcrypt")
    hash_parser.set_defaults(func=hash_password_command)

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
