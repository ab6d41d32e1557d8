"""lexorder CLI entry point."""
import argparse
import json
import logging
import sys

import yaml

from lexorder.core.config import OUTPUT_FORMATS, load_config
from lexorder.core.errors import ConfigError
from lexorder.core.logging import setup_logging, get_run_id
from lexorder.dictionary import read_dictionary
from lexorder.solver import Alphabet, MalformedDictionary, UnderspecifiedDictionary, discover_alphabet

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_UNDERSPECIFIED = 3
EXIT_MALFORMED = 4


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='lexorder',
        description='Discover the alphabet of a language from a dictionary sorted in that language'
    )
    parser.add_argument('dictionary', help='Path to the dictionary file, one word per line')
    parser.add_argument('--config', '-c', help='Path to YAML config file')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Verbosity: -v=INFO, -vv=DEBUG')
    parser.add_argument('--json-logs', action='store_true',
                        help='Output logs in JSON format')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, dest='output_format',
                        help='How to print the alphabet (default: list)')
    parser.add_argument('--encoding', help='Dictionary file encoding (default: utf-8)')
    return parser.parse_args(argv)


def format_alphabet(letters, output_format):
    if output_format == 'plain':
        return ''.join(letters)
    if output_format == 'json':
        return json.dumps({'alphabet': list(letters)}, ensure_ascii=False)
    return Alphabet(letters=list(letters)).describe()


def main(argv=None):
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ConfigError) as e:
        print(f"lexorder: invalid config: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    # CLI args override config
    if args.verbose:
        config.verbosity = args.verbose
    if args.json_logs:
        config.json_logs = True
    if args.output_format:
        config.output_format = args.output_format
    if args.encoding:
        config.encoding = args.encoding

    setup_logging(config.verbosity, config.json_logs)
    logging.info(f"lexorder run_id={get_run_id()} dictionary={args.dictionary}")

    try:
        words = read_dictionary(args.dictionary, config.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        logging.error(f"Failed to read dictionary {args.dictionary}: {e}", extra={"path": args.dictionary})
        print(f"lexorder: cannot read {args.dictionary}: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    outcome = discover_alphabet(words)

    if isinstance(outcome, UnderspecifiedDictionary):
        print(outcome.describe(), file=sys.stderr)
        return EXIT_UNDERSPECIFIED
    if isinstance(outcome, MalformedDictionary):
        print(outcome.describe(), file=sys.stderr)
        return EXIT_MALFORMED

    print(format_alphabet(outcome.letters, config.output_format))
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
