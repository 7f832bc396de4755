"""Fetch per-gene XML entries from the Human Protein Atlas."""

import structlog

from orthoatlas.api_clients.base import RestClient
from orthoatlas.evidence.expression.models import HPA_BASE_URL, ExpressionRecord
from orthoatlas.evidence.expression.transform import parse_expression_record

logger = structlog.get_logger()


def protein_atlas_url(gene_id: str, base_url: str = HPA_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/{gene_id}.xml"


def fetch_protein_atlas_xml(
    client: RestClient,
    gene_id: str,
    base_url: str = HPA_BASE_URL,
) -> str:
    """Download the HPA XML document for one Ensembl gene.

    Args:
        client: HTTP client
        gene_id: Human Ensembl gene ID (ENSG...)
        base_url: HPA base URL

    Returns:
        XML document text

    Raises:
        ValueError: If gene_id is empty
        requests.HTTPError: On non-success status (e.g. unknown gene ID)
        requests.ConnectionError: On connection errors
        requests.Timeout: On timeout
    """
    if not gene_id:
        raise ValueError("Gene ID must be non-empty")

    url = protein_atlas_url(gene_id, base_url)
    logger.info("hpa_fetch_start", gene_id=gene_id, url=url)

    xml_text = client.get_text(url)

    logger.info("hpa_fetch_complete", gene_id=gene_id, size_bytes=len(xml_text))
    return xml_text


def fetch_expression_record(
    client: RestClient,
    gene_id: str,
    base_url: str = HPA_BASE_URL,
) -> ExpressionRecord:
    """Fetch and parse the HPA expression annotations for one gene.

    Raises:
        ValueError: If gene_id is empty or the document has no <entry>
        requests.RequestException: On transport or HTTP errors
    """
    xml_text = fetch_protein_atlas_xml(client, gene_id, base_url)
    return parse_expression_record(xml_text, gene_id=gene_id)
