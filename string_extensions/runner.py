import argparse
import os
import sys
import logging

from dotenv import dotenv_values

from string_extensions.utils import SuffixError, check_char, remove_suffix


APP_NAME = "strext"

logger = logging.getLogger(__name__)


def check_single_char(value):
    try:
        return check_char(value)
    except SuffixError as e:
        raise argparse.ArgumentTypeError(str(e))


def _add_known_args(parser):
    parser.add_argument(
        "--env", type=str, default=".env", help="environment variables (default: .env)"
    )
    parser.add_argument(
        "--prefix",
        type=str,
        default="",
        help="environment variables prefix (default: none)",
    )


ENV_PREFIX = ""


def _load_environment_from_file(argv=None):
    parser = argparse.ArgumentParser(add_help=False)
    _add_known_args(parser)
    args, extra = parser.parse_known_args(argv)

    global ENV_PREFIX
    ENV_PREFIX = args.prefix

    env_file = dotenv_values(args.env)
    os.environ.update({k: v for k, v in env_file.items() if v is not None})


def get_env(name, default=""):
    return os.environ.get(ENV_PREFIX + name, default)


def _read_values(values):
    if values:
        yield from values
        return
    for line in sys.stdin:
        yield remove_suffix(line, "\n")


def main(argv=None):
    _load_environment_from_file(argv)

    parser = argparse.ArgumentParser(
        APP_NAME, description="remove a trailing character from each value"
    )
    _add_known_args(parser)

    parser.add_argument(
        "--char",
        type=check_single_char,
        default=get_env("SUFFIX_CHAR", "/"),
        help="character to remove. Env: SUFFIX_CHAR (default: /)",
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "values", type=str, nargs="*", help="values to process (default: stdin lines)"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            format="%(asctime)s[%(levelname)s]: %(message)s", level=logging.DEBUG
        )
    else:
        logging.basicConfig(format="%(message)s", level=logging.INFO)

    logger.debug(f"env file: {args.env}, prefix: {args.prefix!r}, char: {args.char!r}")

    for value in _read_values(args.values):
        result = remove_suffix(value, args.char)
        logger.debug("%r -> %r", value, result)
        print(result)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
