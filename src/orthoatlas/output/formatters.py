"""Text renderings of expression records: verbose blocks and TSV rows."""

from orthoatlas.evidence.expression.models import ExpressionRecord

OUTPUT_MODES = ("verbose", "tabular")

# Header labels are kept as published: the first column carries the queried
# symbol and the second the entry name, not a gene ID and a symbol.
TABULAR_HEADER = "\t".join([
    "Id",
    "Symbol",
    "Tissue Specificity",
    "Single cell type specificity",
    "Single cell type expression cluster",
    "Immune cell specificity",
    "Brain specificity",
])

TISSUE_SEPARATOR = ", "
CELL_TYPE_SEPARATOR = ","


def format_verbose(record: ExpressionRecord) -> str:
    """Render a record as a labelled block.

    The first line is the entry name; each field follows on its own
    tab-indented line. No trailing newline.
    """
    lines = [
        record.name,
        "\tTissue specificity: "
        + TISSUE_SEPARATOR.join(record.consensus_tissue_specificity),
        "\tSingle cell type specificity: "
        + CELL_TYPE_SEPARATOR.join(record.single_cell_type_specificity),
        f"\tSingle cell type expression cluster: {record.single_cell_expression_cluster}",
        f"\tImmune cell specificity: {record.immune_cell_specificity}",
        f"\tBrain specificity: {record.brain_region_specificity}",
    ]
    return "\n".join(lines)


def format_tabular_row(symbol: str, record: ExpressionRecord) -> str:
    """Render a record as one tab-separated row keyed by the queried symbol."""
    return "\t".join([
        symbol,
        record.name,
        TISSUE_SEPARATOR.join(record.consensus_tissue_specificity),
        CELL_TYPE_SEPARATOR.join(record.single_cell_type_specificity),
        record.single_cell_expression_cluster,
        record.immune_cell_specificity,
        record.brain_region_specificity,
    ])


def format_record(mode: str, symbol: str, record: ExpressionRecord) -> str:
    """Render a record in the given output mode.

    Raises:
        ValueError: If mode is not 'verbose' or 'tabular'
    """
    if mode == "verbose":
        return format_verbose(record)
    if mode == "tabular":
        return format_tabular_row(symbol, record)
    raise ValueError(f"Unknown output mode: {mode!r} (expected one of {OUTPUT_MODES})")
