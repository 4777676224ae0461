from .configuration import Configuration, default_configuration, resolve_options
from .ordering import compare_filenames, numeric_key, sort_filenames


__version__ = "0.1.0"

__all__ = [
    "Configuration",
    "compare_filenames",
    "default_configuration",
    "numeric_key",
    "resolve_options",
    "sort_filenames",
]
