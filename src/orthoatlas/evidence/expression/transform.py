"""Extract expression specificity fields from HPA entry XML."""

import structlog
from bs4 import BeautifulSoup, Tag

from orthoatlas.evidence.expression.models import (
    BRAIN_REGIONAL_ASSAY,
    CONSENSUS_TISSUE_ASSAY,
    IMMUNE_CELL_ASSAY,
    ExpressionRecord,
)

logger = structlog.get_logger()


def _child(parent: Tag | None, name: str) -> Tag | None:
    """Direct child element by tag name."""
    if parent is None:
        return None
    return parent.find(name, recursive=False)


def _text(tag: Tag | None) -> str:
    if tag is None:
        return ""
    return tag.get_text(strip=True)


def _texts(parent: Tag | None, name: str) -> list[str]:
    """Texts of all direct children with the given tag name, in order."""
    if parent is None:
        return []
    return [_text(tag) for tag in parent.find_all(name, recursive=False)]


def parse_expression_record(xml_text: str, gene_id: str = "") -> ExpressionRecord:
    """Parse an HPA entry document into an ExpressionRecord.

    Reads, under the first <entry>:
    - <name> text
    - <rnaExpression assayType="..."> children: consensusTissue gives the
      <tissue> list of its <rnaSpecificity>; immuneCell and
      humanBrainRegional give the rnaSpecificity `specificity` attribute.
      When an assay type occurs more than once, the last one wins.
    - <cellTypeExpression>: <cellTypeSpecificity>/<cellType> list and
      <cellTypeExpressionCluster> text

    Args:
        xml_text: HPA XML document
        gene_id: Gene ID to record on the result

    Returns:
        ExpressionRecord with empty values for anything absent

    Raises:
        ValueError: If the document contains no <entry> element
    """
    soup = BeautifulSoup(xml_text, "lxml-xml")
    entry = soup.find("entry")
    if entry is None:
        raise ValueError(
            f"Protein Atlas document for {gene_id or 'gene'} has no <entry> element"
        )

    record = ExpressionRecord(gene_id=gene_id, name=_text(_child(entry, "name")))

    for expression in entry.find_all("rnaExpression", recursive=False):
        assay_type = expression.get("assayType", "")
        specificity = _child(expression, "rnaSpecificity")

        if assay_type == CONSENSUS_TISSUE_ASSAY:
            record.consensus_tissue_specificity = _texts(specificity, "tissue")
        elif assay_type == IMMUNE_CELL_ASSAY:
            record.immune_cell_specificity = (
                specificity.get("specificity", "") if specificity is not None else ""
            )
        elif assay_type == BRAIN_REGIONAL_ASSAY:
            record.brain_region_specificity = (
                specificity.get("specificity", "") if specificity is not None else ""
            )

    cell_type_expression = _child(entry, "cellTypeExpression")
    record.single_cell_type_specificity = _texts(
        _child(cell_type_expression, "cellTypeSpecificity"), "cellType"
    )
    record.single_cell_expression_cluster = _text(
        _child(cell_type_expression, "cellTypeExpressionCluster")
    )

    logger.debug(
        "hpa_entry_parsed",
        gene_id=gene_id,
        name=record.name,
        tissue_count=len(record.consensus_tissue_specificity),
        cell_type_count=len(record.single_cell_type_specificity),
    )

    return record
