"""Gene mapping module.

Provides symbol file reading, pig-to-human orthologue resolution and
direct symbol lookup against the Ensembl REST API.
"""

from orthoatlas.gene_mapping.mapper import (
    OrthologueMapper,
    SymbolLookup,
)
from orthoatlas.gene_mapping.models import (
    GeneLookupRecord,
    Homology,
    HomologyRecord,
    HomologyResponse,
    HomologyTarget,
)
from orthoatlas.gene_mapping.symbols import read_symbols

__all__ = [
    "OrthologueMapper",
    "SymbolLookup",
    "GeneLookupRecord",
    "Homology",
    "HomologyRecord",
    "HomologyResponse",
    "HomologyTarget",
    "read_symbols",
]
