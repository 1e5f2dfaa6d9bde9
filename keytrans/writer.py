"""
Appends translated locale blocks to the destination file.

The destination is append-only: every run adds blocks after whatever is
already there. Each block is written with a single open/write so a failure
in a later locale never touches earlier blocks.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from keytrans.models import LocaleOutput

logger = logging.getLogger(__name__)


def translation_header(today: date) -> str:
    """Comment header placed above each block, e.g. ``# Keys translated
    automatically on 3/7/2010.`` (month/day/year, no zero padding)."""
    timestamp = f"{today.month}/{today.day}/{today.year}"
    output = [
        "# ",
        f"# Keys translated automatically on {timestamp}.",
        "# ",
    ]
    return "\n".join(output)


class OutputWriter:
    """Append-mode writer for locale blocks.

    Args:
        destination: Output file; created on first write
        today: Date stamped in headers (defaults to the current date)
    """

    def __init__(self, destination: Path, today: Optional[date] = None):
        self.destination = Path(destination)
        self.today = today
        self.blocks_written = 0

    def write_block(self, output: LocaleOutput) -> bool:
        """Append one locale block; returns False when there was nothing to write."""
        if output.is_empty:
            logger.info("Nothing to write for %s", output.locale)
            return False

        header = translation_header(self.today or date.today())
        logger.info("%s:\n%s", output.locale, output.content)
        with open(self.destination, "a", encoding="utf-8") as f:
            f.write(f"\n{header}\n\n{output.content}\n")
        self.blocks_written += 1
        return True
