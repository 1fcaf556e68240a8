#!/usr/bin/env python3
# encoding: utf-8

"""
Split concatenated YAML documents into one file per document

"""

import argparse
import sys

from yamlsplit.output import OutputFileFactory
from yamlsplit.source import stdin_or_input_file
from yamlsplit.splitter import split
from yamlsplit.tools import log_usage_summary
import yamlsplit.global_settings as gs

# Setup logging
import logging
import yamlsplit.logging_format

DESCRIPTION = """Split the documents of a YAML stream into separate files.

A line containing only "---" starts a new document, a line containing only "..." ends it.
The documents of foo.yaml are written to foo-0.yaml, foo-1.yaml, ... in the given order,
documents read from stdin are written to stdin-0.yaml, stdin-1.yaml, ...
"""


def setup_excepthook():
    if not gs.USE_VERBOSE_TRACEBACK:
        return
    if gs.VERBOSE_TRACEBACK_TYPE == "ipython":
        from IPython.core import ultratb
        sys.excepthook = ultratb.VerboseTB()
    elif gs.VERBOSE_TRACEBACK_TYPE != "plain":
        raise ValueError("invalid VERBOSE_TRACEBACK_TYPE %r" % gs.VERBOSE_TRACEBACK_TYPE)


def run(args):
    """ Split the input given in args, errors are passed on to the caller """
    input_file, basename, extension = stdin_or_input_file(args.input)
    try:
        splitter = split(input_file, OutputFileFactory(basename, extension))
    finally:
        if input_file is not sys.stdin.buffer:
            input_file.close()
    if gs.LOG_USAGE_SUMMARY:
        log_usage_summary(splitter)
    return splitter


def main(argv=None):
    """ Parses command line arguments and splits the input, returns the exit code """
    parser = argparse.ArgumentParser(prog='yamlsplit', description=DESCRIPTION,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('--log_level', dest='log_level', metavar='LOG_LEVEL',
                        type=int, default=20, help='log level, 10 for debug messages, 50 for only critical,'
                                                   ' default: 20, ')
    parser.add_argument('input', metavar='INPUT', type=str, nargs='?', default=gs.STDIN_ARGUMENT,
                        help='file to split, "-" or nothing to read from stdin')

    args = parser.parse_args(argv)

    # Setup logging colors
    yamlsplit.logging_format.add_coloring_to_logging()
    logging.basicConfig(format='[%(asctime)s] %(levelname)s: %(message)s', level=args.log_level)

    setup_excepthook()

    try:
        run(args)
    except (OSError, UnicodeDecodeError) as exc:
        logging.error("Split failed: %s" % exc)
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            sys.excepthook(*sys.exc_info())
        return gs.EXIT_ERROR
    return gs.EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
