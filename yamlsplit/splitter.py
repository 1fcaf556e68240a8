"""
Split a stream of concatenated documents into one output file per document.

A line containing only "---" starts a new document, a line containing only "..." ends the
current one. Both markers may be followed by spaces. The "---" in front of the first document
is optional, any content line seen while no document is open starts a new one.
"""

import logging
import re

import yamlsplit.global_settings as gs

# compiled once, used for every line
regex_doc_start = re.compile(gs.DOC_START_PATTERN)
regex_doc_end = re.compile(gs.DOC_END_PATTERN)


def is_doc_start(line):
    return regex_doc_start.match(line) is not None


def is_doc_end(line):
    return regex_doc_end.match(line) is not None


def iter_lines(stream, encoding=None, strip_carriage_return=None):
    """ Yield the decoded lines of a binary stream without the trailing newline.
    A last line without newline is yielded as well.

    :param stream: binary file like object
    :param str|None encoding: defaults to gs.INPUT_ENCODING
    :param bool|None strip_carriage_return: defaults to gs.STRIP_CARRIAGE_RETURN
    :raises UnicodeDecodeError: if a line is not valid in the given encoding
    """
    if encoding is None:
        encoding = gs.INPUT_ENCODING
    if strip_carriage_return is None:
        strip_carriage_return = gs.STRIP_CARRIAGE_RETURN

    for line in stream:
        if line.endswith(b'\n'):
            line = line[:-1]
        if strip_carriage_return and line.endswith(b'\r'):
            line = line[:-1]
        yield line.decode(encoding)


class DocumentSplitter(object):

    """ State machine writing each document to its own file.
    current_file is None while no document is open, at most one file is open at any time.
    """

    def __init__(self, factory):
        """
        :param yamlsplit.output.OutputFileFactory factory:
        """
        self.factory = factory
        self.current_file = None
        self.documents = 0
        self.lines_written = 0

    def _open_new_file(self):
        # the previous document has to be on disk before the next one is created
        self._close_current_file()
        self.current_file = self.factory.open_new_file()
        self.documents += 1

    def _close_current_file(self):
        if self.current_file is not None:
            current_file, self.current_file = self.current_file, None
            current_file.close()

    def feed(self, line):
        """ Handle a single line without its trailing newline

        :param str line:
        """
        if is_doc_start(line):
            # Start of a new document, open a new output file
            self._open_new_file()
        elif is_doc_end(line):
            # End of a document, close the current output file
            self._close_current_file()
        else:
            if self.current_file is None:
                self._open_new_file()
            self.factory.output_line_to_file(line, self.current_file)
            self.lines_written += 1

    def close(self):
        self._close_current_file()

    def __enter__(self):
        return self

    def __exit__(self, type, value, traceback):
        self.close()


def split(stream, factory):
    """ Split all documents in stream into files created by factory

    :param stream: binary file like object
    :param yamlsplit.output.OutputFileFactory factory:
    :return: the finished splitter, holds the number of documents and lines written
    :rtype: DocumentSplitter
    """
    with DocumentSplitter(factory) as splitter:
        for line in iter_lines(stream):
            splitter.feed(line)
    logging.debug("Split %i documents with %i lines" % (splitter.documents, splitter.lines_written))
    return splitter
