"""
Upload acceptance and text decoding.

Responsibilities:
- accept CSV, TSV and plain-text uploads only
- encoding detection + decoding to text
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from charset_normalizer import from_bytes

from .rules import SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)

_EXCEL_CSV_MIME = "application/vnd.ms-excel"  # some systems label .csv this way


def is_supported_file(filename: Optional[str], content_type: Optional[str]) -> bool:
    name = (filename or "").lower()
    mime = (content_type or "").lower()
    return (
        name.endswith(SUPPORTED_EXTENSIONS)
        or mime.startswith("text/")
        or mime == _EXCEL_CSV_MIME
    )


def _is_utf8(codec: str) -> bool:
    return codec.lower().replace("-", "_") in ("utf_8", "utf8")


def decode_upload(raw: bytes) -> tuple[str, Dict[str, Any]]:
    """
    Decode uploaded bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is consumed by the codec (utf-8-sig) when detection says UTF-8.
    - If decoding with the guess fails, fall back to UTF-8.
    - If that fails too, decode UTF-8 with replacement characters.
    """
    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and _is_utf8(decode_used):
        decode_used = "utf-8-sig"

    decode_fallback = False

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        decode_used = "utf-8"
        decode_fallback = True
        try:
            text = raw.decode(decode_used)
        except UnicodeDecodeError:
            # last resort so loading can continue deterministically
            text = raw.decode(decode_used, errors="replace")

    if decode_fallback:
        logger.warning("Decoding fell back to %s (detected: %s)", decode_used, detected)

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
    }
    return text, report
