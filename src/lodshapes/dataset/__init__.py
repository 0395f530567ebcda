from .catalog import UNKNOWN_CLASS, ClassCatalog
from .loader import Dataset, load_files, load_lines

__all__ = [
    "UNKNOWN_CLASS",
    "ClassCatalog",
    "Dataset",
    "load_files",
    "load_lines",
]
