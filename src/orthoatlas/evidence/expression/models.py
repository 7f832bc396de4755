"""Data models for Human Protein Atlas expression annotations."""

from pydantic import BaseModel, Field

# HPA serves one XML document per Ensembl gene at <base>/<gene_id>.xml
HPA_BASE_URL = "https://www.proteinatlas.org"

# rnaExpression assayType values read from the entry
CONSENSUS_TISSUE_ASSAY = "consensusTissue"
IMMUNE_CELL_ASSAY = "immuneCell"
BRAIN_REGIONAL_ASSAY = "humanBrainRegional"


class ExpressionRecord(BaseModel):
    """Expression annotations extracted from one HPA entry.

    Attributes:
        gene_id: Ensembl gene ID the entry was requested for
        name: Entry display name
        consensus_tissue_specificity: Tissues from the consensusTissue assay, in document order
        single_cell_type_specificity: Cell types from cellTypeSpecificity, in document order
        single_cell_expression_cluster: cellTypeExpressionCluster text
        immune_cell_specificity: specificity attribute of the immuneCell assay
        brain_region_specificity: specificity attribute of the humanBrainRegional assay

    Absent fields are empty strings/lists, never None, so every report
    line and column is always rendered.
    """

    gene_id: str = ""
    name: str = ""
    consensus_tissue_specificity: list[str] = Field(default_factory=list)
    single_cell_type_specificity: list[str] = Field(default_factory=list)
    single_cell_expression_cluster: str = ""
    immune_cell_specificity: str = ""
    brain_region_specificity: str = ""
