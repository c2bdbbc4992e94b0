"""Type definition file writer service."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER = logging.getLogger(__name__)


def write_type_definitions(text: str, output_path: Path | str) -> Path:
    """Write generated type definitions, creating parent directories as needed.

    Returns:
      The resolved destination path.

    Raises:
      OSError: If the directory cannot be created or the file cannot be written.
    """
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")
    _LOGGER.debug("Wrote %d characters to %s", len(text), destination)
    return destination.resolve()
