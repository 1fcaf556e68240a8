import logging
import os

import psutil


def format_bytes(b):
    return format_number(b,
                         factor=1024,
                         mapping=['B', 'kB', 'MB', 'GB', 'TB', 'PB', 'EB', 'ZB', 'YB'],
                         use_decimal_after=1)


def format_number(number,
                  factor=1000,
                  mapping=[''] + ['e+%02i' % i for i in range(3, 31, 3)],
                  use_decimal_after=1):
    if use_decimal_after is None:
        use_decimal_after = len(mapping)
    residual = 0
    count = 0
    result = number
    while result >= factor and count < len(mapping) - 1:
        result, residual = divmod(result, factor)
        count += 1
    if count < use_decimal_after:
        return "%i%s" % (result, mapping[count])
    else:
        return "%.2f%s" % ((result * factor + residual) / factor, mapping[count])


def open_files_matching(paths, process=None):
    """ Return which of the given paths are currently opened by the process

    :param list[str] paths:
    :param psutil.Process|None process: defaults to the current process
    :rtype: list[str]
    """
    if process is None:
        process = psutil.Process()
    wanted = {os.path.realpath(p) for p in paths}
    return sorted(f.path for f in process.open_files() if os.path.realpath(f.path) in wanted)


def log_usage_summary(splitter):
    """ Log what was written and how much memory the process used

    :param yamlsplit.splitter.DocumentSplitter splitter:
    """
    factory = splitter.factory
    rss = psutil.Process().memory_info().rss
    logging.info("Wrote %i documents (%i lines, %s) to %i files, memory used: %s" %
                 (splitter.documents, splitter.lines_written, format_bytes(factory.bytes_written),
                  len(factory.created), format_bytes(rss)))
    if factory.created:
        logging.info("Output files: %s ... %s" % (factory.created[0], factory.created[-1]))
