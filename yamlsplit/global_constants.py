
# Document markers, a line has to consist only of the marker and optional spaces
DOC_START_PATTERN = '^--- *$'
DOC_END_PATTERN = r'^\.\.\. *$'

# Input argument used to read from stdin
STDIN_ARGUMENT = '-'

# Output naming, filled with basename, counter and extension
OUTPUT_FILENAME_FORMAT = '{basename}-{counter}.{extension}'

# settings file
GLOBAL_SETTINGS_FILE_DEFAULT = "yamlsplit_settings.py"

# exit codes
EXIT_OK = 0
EXIT_ERROR = 1
