'''
Extract translatable strings of a WordPress plugin or theme into a
POT file.

Examples:

    %(prog)s --slug my-plugin ./my-plugin
    %(prog)s --slug my-theme --exclude tests,build ./my-theme out.pot

Strings are read from PHP and JavaScript translation calls, block.json,
theme.json, readme.txt and the plugin or theme headers.
'''

import argparse
import logging
import os
import sys
import time

from fnmatch import fnmatch
from logging.config import dictConfig
from typing import List, Optional

from .catalog import Catalog
from .config import DEFAULT_EXCLUDE, MakePotConfig, MakePotException
from .extract_catalog import extract_translations, records_to_occurrences
from .extract_code import extract_translations_from_code
from .helper import include_patterns
from .message import TranslationOccurrence
from .parse import flatten, parse_headers_file, parse_json_file
from .parse import parse_readme_file
from .pot_export import sanitize, write_to_pot


LOGGING_CONFIG = {
    'formatters': {
        'standard': {'format': '%(levelname)s: %(message)s'},
    },
    'handlers': {
        'default': {
            'level': 'NOTSET',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'makepot': {
            'handlers': ['default'],
            'level': 'INFO',
        },
    },
    'disable_existing_loggers': False,
    'version': 1,
}

PHP_EXTENSIONS = (".php",)
JS_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx", ".mjs")
JSON_FILES = ("block.json", "theme.json")

log = logging.getLogger(__name__)


def _matches(path, patterns):
    return any(fnmatch(path, p) or fnmatch("/" + path, p) for p in patterns)


def collect_files(config: MakePotConfig) -> List[str]:
    """
    List the files to scan, relative to the source directory,
    in a stable order.
    """
    if not os.path.isdir(config.source_dir):
        raise MakePotException(f"Cannot read {config.source_dir}")

    include = include_patterns(config.include)
    exclude = include_patterns(config.exclude)
    destination = os.path.abspath(config.destination)
    files = []

    for root, dirs, filenames in os.walk(config.source_dir):
        dirs[:] = sorted(d for d in dirs if d not in DEFAULT_EXCLUDE)
        for f in sorted(filenames):
            full_name = os.path.join(root, f)
            if os.path.abspath(full_name) == destination:
                continue
            rel_path = os.path.relpath(full_name, config.source_dir)
            rel_path = rel_path.replace(os.sep, "/")
            if include and not _matches(rel_path, include):
                continue
            if exclude and _matches(rel_path, exclude):
                continue
            files.append(rel_path)
    return files


def extract_file(rel_path, config, warn=None) -> List[TranslationOccurrence]:
    """Extract the translations of a single file."""
    full_name = os.path.join(config.source_dir, rel_path)
    basename = os.path.basename(rel_path)
    top_level = "/" not in rel_path
    occurrences = []

    if basename.endswith(PHP_EXTENSIONS) or \
       (basename.endswith(JS_EXTENSIONS) and not config.skip_js):
        with open(full_name, encoding="utf-8", errors="replace") as fp:
            content = fp.read()
        occurrences += extract_translations_from_code(
            content, rel_path, config, warn=warn)
        if top_level and basename.endswith(PHP_EXTENSIONS):
            occurrences += flatten(
                parse_headers_file(full_name, "plugin", origin=rel_path))
    elif basename in JSON_FILES and not config.skip_json:
        occurrences += flatten(
            parse_json_file(full_name, basename, origin=rel_path))
    elif basename == "readme.txt" and top_level and not config.skip_readme:
        occurrences += flatten(parse_readme_file(full_name, origin=rel_path))
    elif basename == "style.css" and top_level:
        occurrences += flatten(
            parse_headers_file(full_name, "theme", origin=rel_path))
    return occurrences


def make_pot(config: MakePotConfig, warn=None) -> Catalog:
    """Build the catalog of every file of the project, in order."""
    catalog = Catalog()
    files = collect_files(config)
    log.info("Scanning %d file(s) in %s", len(files), config.source_dir)

    for rel_path in files:
        catalog.merge(extract_file(rel_path, config, warn=warn))
    log.debug("collected %d string(s)", len(catalog))

    if config.reference:
        if not os.path.isfile(config.reference):
            raise MakePotException(f"Cannot read {config.reference}")
        try:
            with open(config.reference, encoding="utf-8") as fp:
                records = extract_translations(fp.read())
        except (OSError, UnicodeDecodeError) as error:
            raise MakePotException(
                f"Cannot read {config.reference}: {error}") from None
        catalog.merge(records_to_occurrences(records))
        sanitize(catalog, config.reference)

    return catalog


def main(argv: Optional[List[str]] = None) -> int:
    """
    Called when the script is executed directly
    """
    arg_parser = argparse.ArgumentParser(
        prog="make-pot",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    arg_parser.add_argument(
        'source_dir', nargs='?', default='.',
        help='Plugin or theme directory')
    arg_parser.add_argument(
        'destination', nargs='?',
        help='POT file to write, defaults to languages/<slug>.pot')
    arg_parser.add_argument(
        '--slug', dest='slug',
        help='Plugin or theme slug, defaults to the directory name')
    arg_parser.add_argument(
        '--domain', dest='domain',
        help='Text domain written to the POT header')
    arg_parser.add_argument(
        '--include', dest='include', action='append',
        help='Comma separated files, directories or globs to scan')
    arg_parser.add_argument(
        '--exclude', dest='exclude', action='append',
        help='Comma separated files, directories or globs to skip')
    arg_parser.add_argument(
        '--reference', dest='reference',
        help='Existing POT to take header strings and plurals from')
    arg_parser.add_argument(
        '--skip-js', dest='skip_js', action='store_true',
        help='Do not scan JavaScript files')
    arg_parser.add_argument(
        '--skip-json', dest='skip_json', action='store_true',
        help='Do not scan block.json and theme.json')
    arg_parser.add_argument(
        '--skip-readme', dest='skip_readme', action='store_true',
        help='Do not scan readme.txt')
    arg_parser.add_argument('--author', dest='author')
    arg_parser.add_argument('--email', dest='email')
    arg_parser.add_argument('--license', dest='license')
    arg_parser.add_argument('--package-name', dest='package_name')
    arg_parser.add_argument('--package-version', dest='package_version')
    arg_parser.add_argument(
        '--loglevel', dest='loglevel',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='INFO',
        help="set verbosity level")

    options = arg_parser.parse_args(argv)

    dictConfig(LOGGING_CONFIG)
    logging.getLogger('makepot').setLevel(getattr(logging, options.loglevel))

    time_start = time.monotonic()
    try:
        config = MakePotConfig.from_options(options)
        catalog = make_pot(config)
        count = write_to_pot(catalog, config)
    except MakePotException as exception:
        log.error("%s", exception)
        return 1

    elapsed = (time.monotonic() - time_start) * 1000
    log.info("Translation POT file %s created with %d string(s) in %dms",
             config.destination, count, elapsed)
    return 0


if __name__ == '__main__':
    sys.exit(main())
