"""Output file writing.

Every output is a full overwrite: an existing file at the target path is
removed before the new content is written, so repeated runs over the same
input produce byte-identical files.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from pathlib import Path

from resbridge.constants import UTF8_BOM
from resbridge.diagnostics import OutputWriteError

__all__ = ["encode_with_bom", "write_output"]

logger = logging.getLogger(__name__)


def encode_with_bom(text: str) -> bytes:
    """Encode text as UTF-8 with a leading byte-order mark."""
    return UTF8_BOM + text.encode("utf-8")


def write_output(path: Path, content: bytes) -> Path:
    """Replace the file at `path` with `content`.

    Parent directories are created as needed.

    Args:
        path: Target file
        content: Complete file content

    Returns:
        The written path

    Raises:
        OutputWriteError: If the file cannot be removed or written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.unlink(missing_ok=True)
        path.write_bytes(content)
    except OSError as e:
        raise OutputWriteError(e.strerror or str(e), path=path) from e

    logger.debug("Wrote %s (%d bytes)", path, len(content))
    return path
