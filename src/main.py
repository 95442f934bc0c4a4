import sys
import logging
import argparse

from env_writer import EnvFileWriter
from errors import SecretError
from secret_generator import SecretGenerator
from settings import ENV_FILE_PATH, LOG_FORMAT, SECRET_KEY_NAME

__version__ = "0.1.0"


def setup_logging(verbose=False):
    # stderr only; never log to a file next to the secrets.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ironmonger",
        description="Ironmonger CLI - Generate and manage application secrets"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subcommands = parser.add_subparsers(dest="command")
    create = subcommands.add_parser(
        "create:secret",
        aliases=["create-secret"],
        help="Generate and store a new application secret"
    )
    create.add_argument("-n", "--name", metavar="KEY_NAME", default=SECRET_KEY_NAME,
                        help=f"Name of the environment variable (default: {SECRET_KEY_NAME})")
    create.add_argument("-f", "--file", metavar="FILE_PATH", default=ENV_FILE_PATH,
                        help=f"Path to the .env file (default: {ENV_FILE_PATH})")
    create.set_defaults(handler=create_secret)
    return parser


def create_secret(args):
    secret = SecretGenerator().generate()
    EnvFileWriter(args.file, args.name).write(secret)
    print(f"New {args.name} generated and saved: {secret}")
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 2

    try:
        return handler(args)
    except SecretError as e:
        logging.error(str(e))
        return 1


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
