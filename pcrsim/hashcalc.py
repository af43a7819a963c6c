from __future__ import annotations
import enum
from .digest import Algorithm, digest_for
from .measurements import decode_hex

class InputKind(enum.Enum):
    TEXT = 'text'
    HEX = 'hex'

def calculate_hash(data: str, input_kind: InputKind, algorithm: Algorithm)->str:
    """One-shot digest of ``data``; no PCR state is involved.

    TEXT hashes the UTF-8 bytes of the string. HEX drops spaces and decodes,
    raising InvalidHexInput on odd length or stray characters.
    """
    if input_kind is InputKind.HEX:
        raw = decode_hex(data.replace(' ', ''))
    else:
        raw = data.encode('utf-8')
    return digest_for(algorithm).digest(raw).hex()
