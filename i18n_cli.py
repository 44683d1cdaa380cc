"""
i18n converts between a directory of per-language .properties resource files
and a single .csv table with one column per language.

Given a directory it writes uiMessages.csv, given a .csv file it writes one
uiMessages_<language>.properties per language column. Output always goes to
the current working directory.
"""
import argparse
import logging
import sys

from i18n_converters.base import ConversionConfig
from i18n_converters.driver import run_conversion
from i18n_formats.errors import I18nError

logger = logging.getLogger("i18n")

USAGE = """Usage: i18n -i ./path/to/my/resources OR i18n -i ./path/to/test.csv

provided an input path i18n determines whether or not to generate a .csv
file or a set of .properties files.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="i18n", usage=USAGE, description=__doc__,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("-i", dest="input", help="input path: either a directory or a file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every conversion step")
    return parser


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        format="i18n: %(message)s",
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        force=True,
    )


def cli(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    if not argv:
        sys.stderr.write(USAGE)
        return 2

    args = parser.parse_args(argv)
    if not args.input:
        sys.stderr.write(USAGE)
        return 2

    setup_logging(args.verbose)
    config = ConversionConfig(input_path=args.input)
    try:
        final_state = run_conversion(config)
    except (I18nError, OSError) as e:
        logger.error(e)
        return 1

    for path in final_state.get("written", []):
        logger.info("wrote %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(cli())
