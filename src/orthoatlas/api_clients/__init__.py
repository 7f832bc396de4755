"""HTTP client shared by the Ensembl and Protein Atlas lookups."""

from orthoatlas.api_clients.base import RestClient

__all__ = ["RestClient"]
