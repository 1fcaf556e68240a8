"""
Creates the numbered output files, one for each document.
"""

import logging

import yamlsplit.global_settings as gs


class OutputFileFactory(object):

    """ Hands out new output files named {basename}-{counter}.{extension}, e.g.::

        factory = OutputFileFactory('foo', 'yaml')
        factory.open_new_file()  # foo-0.yaml
        factory.open_new_file()  # foo-1.yaml

    Existing files are overwritten.
    """

    def __init__(self, basename, extension, start=None):
        """
        :param str basename: basename including leading path components
        :param str extension: extension without the leading '.'
        :param int|None start: number of the first file, gs.FIRST_OUTPUT_INDEX if not set
        """
        self.basename = basename
        self.extension = extension
        self.counter = gs.FIRST_OUTPUT_INDEX if start is None else start
        self.created = []
        self.bytes_written = 0

    def filename(self, counter=None):
        """
        :param int|None counter: defaults to the number of the next file
        :rtype: str
        """
        if counter is None:
            counter = self.counter
        return gs.OUTPUT_FILENAME_FORMAT.format(basename=self.basename,
                                                counter=counter,
                                                extension=self.extension)

    def open_new_file(self):
        """ Create the next output file, the counter is only increased if the file could be created

        :return: buffered binary file
        """
        output_filename = self.filename()
        output_file = open(output_filename, 'wb')
        self.counter += 1
        self.created.append(output_filename)
        logging.debug("Opened output file: %s" % output_filename)
        return output_file

    def output_line_to_file(self, line, output_file):
        """ Write line followed by a single newline, line endings are not normalized

        :param str line:
        :param output_file: file returned by open_new_file
        """
        data = line.encode(gs.OUTPUT_ENCODING) + b'\n'
        output_file.write(data)
        self.bytes_written += len(data)
