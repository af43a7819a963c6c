from __future__ import annotations
import logging
from typing import List, Tuple
from .digest import Digest
from .errors import InvalidIndex

logger = logging.getLogger(__name__)

NUM_PCRS = 24
# PCRs 17-22 are the locality-reset registers and start out as all 0xFF
FF_PCRS = range(17, 23)

def initial_value(index: int, size: int)->bytes:
    return (b'\xff' if index in FF_PCRS else b'\x00') * size

class PcrBank:
    """24 hash-chained registers sized to the active digest.

    A register only moves forward through ``extend``; the only ways back are
    ``initialize`` (whole bank) and ``reset_slot`` (one register).
    """

    def __init__(self, digest: Digest):
        self.digest = digest
        self._slots: List[bytes] = []
        self.initialize()

    @property
    def size(self)->int:
        return self.digest.output_size

    def initialize(self, digest: Digest | None = None)->None:
        if digest is not None: self.digest = digest
        self._slots = [initial_value(i, self.size) for i in range(NUM_PCRS)]

    def check_index(self, index: int)->None:
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < NUM_PCRS:
            raise InvalidIndex(index)

    def reset_slot(self, index: int)->None:
        self.check_index(index)
        self._slots[index] = initial_value(index, self.size)

    def extend(self, index: int, measurement: bytes)->bytes:
        self.check_index(index)
        new = self.digest.digest(self._slots[index] + measurement)
        logger.debug('extend PCR%d with %s -> %s', index, measurement.hex(), new.hex())
        self._slots[index] = new
        return new

    def value(self, index: int)->bytes:
        self.check_index(index)
        return self._slots[index]

    def hex(self, index: int)->str:
        return self.value(index).hex()

    def values(self)->List[Tuple[int, str]]:
        return [(i, v.hex()) for i, v in enumerate(self._slots)]

    def __len__(self)->int:
        return NUM_PCRS
