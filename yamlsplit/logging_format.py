"""
Add color to logging output written to a terminal

"""

import copy
import logging

color_end_marker = "\x1b[0m"

level_colors = [
    (logging.ERROR, "\x1b[31m"),  # red, also used for critical
    (logging.WARNING, "\x1b[33m"),  # yellow
    (logging.INFO, "\x1b[32m"),  # green
    (logging.DEBUG, "\x1b[35m"),  # pink
]


def color_mapping(levelno):
    for level, color in level_colors:
        if levelno >= level:
            return color
    return color_end_marker  # normal


def stream_is_terminal(handler):
    isatty = getattr(getattr(handler, 'stream', None), 'isatty', None)
    return bool(isatty and isatty())


def add_coloring_to_emit_ansi(func):
    """
    Wrap logging.StreamHandler.emit, messages are only colored if the handler writes to a terminal,
    log files and pipes stay plain.
    """

    def add_color(handler, record):
        if not stream_is_terminal(handler):
            return func(handler, record)
        # the record is shared between all handlers, only color our copy
        record = copy.copy(record)
        record.msg = color_mapping(record.levelno) + str(record.msg) + color_end_marker
        return func(handler, record)

    add_color.colored = True
    return add_color


def add_coloring_to_logging():
    """
    Adds colors to logging output

    """
    if not getattr(logging.StreamHandler.emit, 'colored', False):
        logging.StreamHandler.emit = add_coloring_to_emit_ansi(logging.StreamHandler.emit)
