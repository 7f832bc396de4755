"""Evidence layers fetched per human gene."""
