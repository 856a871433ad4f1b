"""Read landing site catalogs from delimited text files."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterator, Union

logger = logging.getLogger(__name__)


def read_rows(path: Union[str, Path], delimiter: str = ",") -> Iterator[list[str]]:
    """Yield the stripped fields of each row in a delimited file.

    Blank lines and lines starting with ``#`` are skipped. Quote characters
    inside a field (seconds marks such as ``48"``) are kept as-is.
    """
    with open(path, newline="", encoding="utf-8-sig") as fh:
        reader = csv.reader(fh, delimiter=delimiter, skipinitialspace=True)
        for row in reader:
            if not row or not any(f.strip() for f in row):
                continue
            if row[0].lstrip().startswith("#"):
                continue
            yield [f.strip() for f in row]

    logger.debug("Finished reading %s", path)
