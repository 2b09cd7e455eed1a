"""Detection of the UTF-8 byte-order mark at the start of a byte stream."""

from __future__ import annotations

from typing import BinaryIO

from .logging import get_logger

UTF8_BOM = b"\xef\xbb\xbf"

logger = get_logger(__name__)


def _read_prefix(source: BinaryIO, size: int) -> bytes:
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = source.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def has_bom(source: BinaryIO) -> bool:
    """Return ``True`` when ``source`` starts with the UTF-8 BOM.

    Consumes up to three bytes and never seeks back, so callers copying the
    rest of the stream get the content without the BOM. Short or failing
    reads count as "no BOM".
    """

    try:
        prefix = _read_prefix(source, len(UTF8_BOM))
    except OSError as exc:
        logger.warning("bom_read_failed", error=str(exc))
        return False
    if len(prefix) < len(UTF8_BOM):
        logger.warning("bom_read_failed", error="unexpected end of file", bytes_read=len(prefix))
        return False
    return prefix == UTF8_BOM


__all__ = ["UTF8_BOM", "has_bom"]
