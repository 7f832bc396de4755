from .loader import load_config, load_config_with_overrides
from .schema import (
    ReportConfig,
    EnsemblConfig,
    ProteinAtlasConfig,
    APIConfig,
    ReportOptions,
)

__all__ = [
    "load_config",
    "load_config_with_overrides",
    "ReportConfig",
    "EnsemblConfig",
    "ProteinAtlasConfig",
    "APIConfig",
    "ReportOptions",
]
