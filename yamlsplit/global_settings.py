"""
These settings can be overwritten via a ``yamlsplit_settings.py`` file in the current directory,
or via environment variables starting with ``YAMLSPLIT_``, when ``yamlsplit`` is run.
"""

import os
from yamlsplit.global_constants import *

#: Virtual filename used to name the output files if the input is read from stdin
STDIN_VIRTUAL_FILENAME = 'stdin.yaml'

#: Number used for the first output file. Documented as 1 for a long time, but the files
#: were always numbered starting at 0, so 0 is kept as default.
FIRST_OUTPUT_INDEX = 0

#: Encoding used to decode each input line, lines that fail to decode abort the split
INPUT_ENCODING = 'utf-8'
#: Encoding used for the output files
OUTPUT_ENCODING = 'utf-8'

#: Remove one trailing carriage return from each line before matching the markers,
#: otherwise "---\r" is treated as content
STRIP_CARRIAGE_RETURN = True

#: Use ipython traceback
USE_VERBOSE_TRACEBACK = True
#: The verbose traceback type. "ipython" or "plain"
VERBOSE_TRACEBACK_TYPE = "ipython"

#: Log how many documents, lines and bytes got written after the split
LOG_USAGE_SUMMARY = True


# Internal functions
def update_global_settings_from_text(text, filename):
    """
    :param str text:
    :param str filename:
    :return: nothing
    """
    # create basically empty globals
    globals_ = {
        '__builtins__': globals()['__builtins__'],
        '__file__': filename,
        '__name__': filename,
        '__package__': None,
        '__doc__': None,
    }
    globals_keys = list(globals_.keys())

    # compile is needed for a nice trace back
    exec(compile(text, filename, "exec"), globals_)

    for k, v in globals_.items():
        if k not in globals_keys:
            globals()[k] = v


def update_global_settings_from_file(filename):
    """
    :param str filename:
    :return: nothing
    """
    globals()['GLOBAL_SETTINGS_FILE'] = filename

    # skip if settings file doesn't exist
    content = ''
    if filename:
        try:
            with open(filename, encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            pass

    globals()['GLOBAL_SETTINGS_FILE_CONTENT'] = content
    update_global_settings_from_text(content, filename)


ENVIRONMENT_SETTINGS = {}
ENVIRONMENT_SETTINGS_PREFIX = 'YAMLSPLIT_'


def update_global_settings_from_env():
    """
    :return: nothing
    """
    from ast import literal_eval
    for k, v in os.environ.items():
        if k.startswith(ENVIRONMENT_SETTINGS_PREFIX):
            ENVIRONMENT_SETTINGS[k] = v
            k = k[len(ENVIRONMENT_SETTINGS_PREFIX):]
            # Try to eval parameter, if not possible use as string
            try:
                v = literal_eval(v)
            except (ValueError, SyntaxError):
                pass
            globals()[k] = v


update_global_settings_from_file(os.environ.get(ENVIRONMENT_SETTINGS_PREFIX + 'GLOBAL_SETTINGS_FILE',
                                                GLOBAL_SETTINGS_FILE_DEFAULT))
update_global_settings_from_env()
