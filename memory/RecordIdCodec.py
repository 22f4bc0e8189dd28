# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: RecordIdCodec
# -----------------------------------------------------------------------------
import base64
import binascii
import re
from typing import Optional

from memory.exceptions import DecodingError

# Azure AI Search keys may only contain letters, digits, underscore, dash and
# equal sign, so record ids (often URLs) are stored URL-safe base64 encoded.
# Padding is always emitted and always required on decode.
_ENCODED_ID_PATTERN = re.compile(r"^[A-Za-z0-9_\-]*={0,2}$")


def encode_id(real_id: Optional[str]) -> str:
    """Encode a natural record id into a storage-safe key ("" for None)."""
    if real_id is None:
        return ""
    return base64.urlsafe_b64encode(real_id.encode("utf-8")).decode("ascii")


def decode_id(encoded_id: Optional[str]) -> str:
    """
    Decode a storage key back into the natural record id ("" for None).

    Raises DecodingError if the key is not padded URL-safe base64 or the
    decoded bytes are not UTF-8.
    """
    if encoded_id is None:
        return ""

    if not _ENCODED_ID_PATTERN.match(encoded_id) or len(encoded_id) % 4 != 0:
        raise DecodingError(f"Invalid encoded record id: {encoded_id!r}")

    try:
        raw = base64.urlsafe_b64decode(encoded_id.encode("ascii"))
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise DecodingError(f"Invalid encoded record id: {encoded_id!r}") from e
