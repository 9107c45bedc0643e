"""
CSV Exchange Package

Moves record collections in and out of the ledger as CSV text.
"""

from .codec import decode, encode
from .exporter import export_collection, export_filename
from .importer import ImportResult, import_csv_file, import_csv_text, merge_records, read_import_file

__all__ = [
    "ImportResult",
    "decode",
    "encode",
    "export_collection",
    "export_filename",
    "import_csv_file",
    "import_csv_text",
    "merge_records",
    "read_import_file",
]
