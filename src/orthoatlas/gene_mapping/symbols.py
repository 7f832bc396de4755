"""Gene symbol input files."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_symbols(path: Path | str) -> list[str]:
    """Read gene symbols from a newline-delimited UTF-8 file.

    Surrounding whitespace is stripped and blank lines are dropped. Order
    and duplicates are kept, since each line is one lookup.

    Args:
        path: Input file, one symbol per line

    Returns:
        Symbols in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Gene symbol file not found: {path}")

    symbols = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            symbol = line.strip()
            if symbol:
                symbols.append(symbol)

    logger.info(f"Read {len(symbols)} gene symbols from {path}")
    return symbols
