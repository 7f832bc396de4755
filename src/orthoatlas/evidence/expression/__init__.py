"""Tissue and cell-type expression annotations from the Human Protein Atlas.

For one human Ensembl gene, reports:
- Consensus tissue specificity (tissue list)
- Single cell type specificity and expression cluster
- Immune cell specificity
- Brain region specificity

Follows the fetch -> transform pattern: fetch downloads the entry XML,
transform extracts the fields into an ExpressionRecord.
"""

from orthoatlas.evidence.expression.fetch import (
    fetch_expression_record,
    fetch_protein_atlas_xml,
    protein_atlas_url,
)
from orthoatlas.evidence.expression.models import (
    BRAIN_REGIONAL_ASSAY,
    CONSENSUS_TISSUE_ASSAY,
    HPA_BASE_URL,
    IMMUNE_CELL_ASSAY,
    ExpressionRecord,
)
from orthoatlas.evidence.expression.transform import parse_expression_record

__all__ = [
    "fetch_expression_record",
    "fetch_protein_atlas_xml",
    "protein_atlas_url",
    "BRAIN_REGIONAL_ASSAY",
    "CONSENSUS_TISSUE_ASSAY",
    "HPA_BASE_URL",
    "IMMUNE_CELL_ASSAY",
    "ExpressionRecord",
    "parse_expression_record",
]
