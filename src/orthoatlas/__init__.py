"""Orthoatlas: pig-to-human orthologue lookup with Human Protein Atlas expression reports."""

__version__ = "0.1.0"
