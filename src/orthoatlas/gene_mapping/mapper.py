"""Orthologue resolution and symbol lookup via the Ensembl REST API.

Resolves source-species gene symbols (pig by default) to the Ensembl IDs of
their human orthologues, or looks up human symbols directly.
"""

import logging

from orthoatlas.api_clients.base import RestClient
from orthoatlas.config.schema import EnsemblConfig
from orthoatlas.gene_mapping.models import GeneLookupRecord, HomologyResponse

logger = logging.getLogger(__name__)


class OrthologueMapper:
    """Resolve gene symbols to orthologous target-species gene IDs.

    Issues one homology request per symbol. Every target of every homology
    is returned; ambiguous (one-to-many) orthology is not disambiguated.
    """

    def __init__(self, client: RestClient, config: EnsemblConfig | None = None):
        """Initialize mapper.

        Args:
            client: HTTP client used for the homology requests
            config: Ensembl endpoint and query options (default: pig -> human)
        """
        self.client = client
        self.config = config or EnsemblConfig()

    def homology_url(self, symbol: str) -> str:
        return (
            f"{self.config.base_url}/homology/symbol/"
            f"{self.config.source_species}/{symbol}"
        )

    def homology_params(self) -> dict[str, str | int]:
        return {
            "sequence": self.config.sequence_type,
            "target_taxon": self.config.target_taxon,
            "target_species": self.config.target_species,
            "type": self.config.homology_type,
            "content-type": "application/json",
        }

    def fetch(self, symbol: str) -> HomologyResponse:
        """Fetch and decode the homology document for one symbol.

        Raises:
            ValueError: If symbol is empty
            requests.HTTPError: On non-success status
            requests.JSONDecodeError: If the body is not JSON
            pydantic.ValidationError: If the body doesn't match the homology schema
        """
        if not symbol:
            raise ValueError("Gene symbol must be non-empty")

        data = self.client.get_json(
            self.homology_url(symbol),
            params=self.homology_params(),
        )
        return HomologyResponse.model_validate(data)

    def resolve(self, symbol: str) -> list[str]:
        """Resolve a symbol to orthologous gene IDs in response order.

        Args:
            symbol: Source-species gene symbol

        Returns:
            Target gene IDs; empty if no orthologue was found
        """
        response = self.fetch(symbol)
        target_ids = response.target_ids()

        if not target_ids:
            logger.info(f"No {self.config.target_species} orthologue for {symbol}")
        elif len(target_ids) > 1:
            logger.info(
                f"{symbol}: {len(target_ids)} orthologues "
                f"({', '.join(target_ids)})"
            )
        else:
            logger.debug(f"{symbol} -> {target_ids[0]}")

        return target_ids


class SymbolLookup:
    """Batch lookup of gene symbols to Ensembl gene IDs in one species.

    Used when the input symbols are already human and no orthology step
    is needed.
    """

    def __init__(self, client: RestClient, config: EnsemblConfig | None = None):
        self.client = client
        self.config = config or EnsemblConfig()

    def lookup_url(self) -> str:
        return f"{self.config.base_url}/lookup/symbol/{self.config.lookup_species}"

    def lookup(self, symbols: list[str]) -> dict[str, str]:
        """Map symbols to Ensembl gene IDs with a single POST request.

        Args:
            symbols: Gene symbols in the lookup species

        Returns:
            Mapping symbol -> gene ID, in input order. Symbols Ensembl does
            not return are absent.

        Raises:
            requests.HTTPError: On non-success status
            pydantic.ValidationError: If a returned record lacks a string `id`
        """
        if not symbols:
            return {}

        data = self.client.post_json(self.lookup_url(), {"symbols": symbols})
        if not isinstance(data, dict):
            raise ValueError(
                f"Unexpected symbol lookup response type: {type(data).__name__}"
            )

        records = {
            symbol: GeneLookupRecord.model_validate(info)
            for symbol, info in data.items()
        }

        mapped: dict[str, str] = {}
        missing: list[str] = []
        for symbol in symbols:
            record = records.get(symbol)
            if record is None:
                missing.append(symbol)
            else:
                mapped[symbol] = record.id

        logger.info(
            f"Symbol lookup complete: {len(mapped)}/{len(symbols)} found"
        )
        if missing:
            logger.warning(f"Symbols not found in Ensembl: {', '.join(missing)}")

        return mapped
