"""Report output formatting."""

from orthoatlas.output.formatters import (
    OUTPUT_MODES,
    TABULAR_HEADER,
    format_record,
    format_tabular_row,
    format_verbose,
)

__all__ = [
    "OUTPUT_MODES",
    "TABULAR_HEADER",
    "format_record",
    "format_tabular_row",
    "format_verbose",
]
