from .output import OutputFileFactory
from .splitter import DocumentSplitter, split
from .source import basename, stdin_or_input_file
import yamlsplit.global_settings as gs

__all__ = ["OutputFileFactory", "DocumentSplitter", "split", "basename", "stdin_or_input_file", "gs"]
