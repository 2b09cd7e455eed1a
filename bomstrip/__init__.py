"""Strip the UTF-8 byte-order mark from files in place."""

from __future__ import annotations

__version__ = "1.0.0"

from .detector import UTF8_BOM, has_bom
from .errors import BomStripError
from .pipeline import process_file, process_files
from .rewriter import remove_bom

__all__ = [
    "BomStripError",
    "UTF8_BOM",
    "__version__",
    "has_bom",
    "process_file",
    "process_files",
    "remove_bom",
]
