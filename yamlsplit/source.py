"""
Resolve where the documents are read from and how the output files are named.
"""

import logging
import os
import sys

import yamlsplit.global_settings as gs


def basename(filename):
    """ Get the basename of a file without the extension. Includes any leading path components.
    The extension is defined as anything after the last "." in the filename, e.g.::

        basename('dir/foo.bar.yaml') == ('dir/foo.bar', 'yaml')
        basename('foo') == ('foo', '')

    :param str filename:
    :return: basename and extension
    :rtype: (str, str)
    """
    dirname, filename = os.path.split(filename)
    # Get everything before the last "."
    stem, dot, extension = filename.rpartition('.')
    if not dot:
        stem, extension = filename, ''
    return os.path.join(dirname, stem), extension


def stdin_or_input_file(input_filename=None):
    """ Open the input and derive the names of the output files from it.
    Reads from stdin if input_filename is None or '-', the outputs are named after
    gs.STDIN_VIRTUAL_FILENAME in that case.

    :param str|None input_filename:
    :return: binary input stream, basename and extension
    :rtype: (io.BufferedIOBase, str, str)
    """
    if input_filename is None or input_filename == gs.STDIN_ARGUMENT:
        logging.debug("Reading documents from stdin")
        input_file = sys.stdin.buffer
        input_filename = gs.STDIN_VIRTUAL_FILENAME
    else:
        logging.debug("Reading documents from %s" % input_filename)
        input_file = open(input_filename, 'rb')
    return (input_file,) + basename(input_filename)
