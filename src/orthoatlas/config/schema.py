"""Pydantic models for report configuration."""

import hashlib
import json
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class EnsemblConfig(BaseModel):
    """Ensembl REST endpoints and homology query options."""

    base_url: str = Field(
        default="https://rest.ensembl.org",
        description="Ensembl REST API base URL",
    )
    source_species: str = Field(
        default="Sus_scrofa",
        description="Species of the input gene symbols",
    )
    target_species: str = Field(
        default="human",
        description="Species of the orthologues to report",
    )
    target_taxon: int = Field(
        default=9606,
        ge=1,
        description="NCBI taxon ID of the target species",
    )
    sequence_type: str = Field(
        default="cdna",
        description="Sequence type requested from the homology endpoint",
    )
    homology_type: str = Field(
        default="orthologues",
        description="Homology relation type (orthologues, paralogues, all)",
    )
    lookup_species: str = Field(
        default="homo_sapiens",
        description="Species used for direct symbol lookups",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so paths can be appended with '/'."""
        return v.rstrip("/")


class ProteinAtlasConfig(BaseModel):
    """Human Protein Atlas endpoint."""

    base_url: str = Field(
        default="https://www.proteinatlas.org",
        description="Human Protein Atlas base URL (entries served as <base>/<id>.xml)",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so paths can be appended with '/'."""
        return v.rstrip("/")


class APIConfig(BaseModel):
    """Configuration for the HTTP client."""

    timeout_seconds: int = Field(
        default=30,
        ge=1,
        description="Request timeout in seconds",
    )


class ReportOptions(BaseModel):
    """Output and failure handling for a report run."""

    output_mode: Literal["verbose", "tabular"] = Field(
        default="verbose",
        description="verbose: one labelled line per field; tabular: one TSV row per orthologue",
    )
    error_policy: Literal["abort", "skip"] = Field(
        default="abort",
        description="abort: stop on the first failed lookup; skip: warn and continue",
    )


class ReportConfig(BaseModel):
    """Main report configuration."""

    ensembl: EnsemblConfig = Field(
        default_factory=EnsemblConfig,
        description="Ensembl REST configuration",
    )
    protein_atlas: ProteinAtlasConfig = Field(
        default_factory=ProteinAtlasConfig,
        description="Human Protein Atlas configuration",
    )
    api: APIConfig = Field(
        default_factory=APIConfig,
        description="HTTP client configuration",
    )
    report: ReportOptions = Field(
        default_factory=ReportOptions,
        description="Output mode and error policy",
    )

    def config_hash(self) -> str:
        """
        Compute SHA-256 hash of the configuration.

        Returns a deterministic hash based on all config values,
        useful for telling apart reports produced with different settings.
        """
        config_dict = self.model_dump(mode="python")
        config_json = json.dumps(
            config_dict,
            sort_keys=True,
            default=str,
        )
        return hashlib.sha256(config_json.encode()).hexdigest()
