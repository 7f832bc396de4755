"""Typed records decoded from Ensembl REST responses."""

from pydantic import BaseModel, ConfigDict, Field


class HomologyTarget(BaseModel):
    """Target side of a homology relation (the orthologous gene)."""

    model_config = ConfigDict(extra="ignore")

    id: str
    species: str | None = None
    protein_id: str | None = None


class Homology(BaseModel):
    """One homology relation between the queried gene and a target gene."""

    model_config = ConfigDict(extra="ignore")

    target: HomologyTarget
    type: str | None = None


class HomologyRecord(BaseModel):
    """Homologies found for one source gene matching the queried symbol."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    homologies: list[Homology] = Field(default_factory=list)


class HomologyResponse(BaseModel):
    """Body of /homology/symbol/<species>/<symbol>.

    Attributes:
        data: Zero or more source-gene records. Empty when Ensembl knows the
            symbol but has no homology of the requested type.
    """

    model_config = ConfigDict(extra="ignore")

    data: list[HomologyRecord] = Field(default_factory=list)

    def target_ids(self) -> list[str]:
        """Flatten target gene IDs across all records, in response order."""
        return [
            homology.target.id
            for record in self.data
            for homology in record.homologies
        ]


class GeneLookupRecord(BaseModel):
    """One value of the /lookup/symbol/<species> response mapping.

    Only `id` is required; a record without a string ID fails validation.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    display_name: str | None = None
    biotype: str | None = None
    species: str | None = None
    assembly_name: str | None = None
