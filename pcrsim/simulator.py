from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Tuple
from .digest import Algorithm, digest_for
from .pcr import PcrBank
from .measurement_log import MeasurementLog
from .measurements import decode_hex, parse_hex
from .errors import SimulatorError

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = Algorithm.SHA256

class PcrSimulator:
    """A PCR bank plus the log of measurements extended into it.

    Not thread safe; callers sharing an instance must serialize access.
    """

    def __init__(self, algorithm: Algorithm = DEFAULT_ALGORITHM):
        self.algorithm = algorithm
        self.bank = PcrBank(digest_for(algorithm))
        self.log = MeasurementLog()

    def extend_pcr(self, index: int, measurement: bytes)->None:
        self.bank.extend(index, measurement)

    def add_measurement(self, description: str, hex_value: str, index: int)->None:
        # decode and check the index before touching anything so a failure leaves log and bank as they were
        value = decode_hex(hex_value)
        self.bank.check_index(index)
        self.log.append(description, value, index)
        self.bank.extend(index, value)

    def get_pcr_hex(self, index: int)->str:
        return self.bank.hex(index)

    def get_all_pcr_values(self)->List[Tuple[int, str]]:
        return self.bank.values()

    def reset(self)->None:
        self.bank.initialize()
        self.log.clear()
        logger.debug('bank reset (%s)', self.algorithm.value)

    def change_algorithm(self, algorithm: Algorithm)->None:
        self.algorithm = algorithm
        self.bank.initialize(digest_for(algorithm))
        self.log.clear()
        logger.debug('algorithm switched to %s', algorithm.value)

    def replay(self, index: int, measurements: Iterable[str])->str:
        self.bank.reset_slot(index)
        for n, item in enumerate(measurements):
            try:
                self.bank.extend(index, parse_hex(item))
            except SimulatorError:
                # earlier extensions stay applied; the slot is partially advanced
                logger.warning('replay of PCR%d stopped at item %d (%r)', index, n, item)
                raise
        value = self.bank.hex(index)
        logger.debug('replayed PCR%d -> %s', index, value)
        return value

    def snapshot(self)->Dict[str, Any]:
        return {
            'algorithm': self.algorithm.value,
            'pcrs': {str(i): v for i, v in self.bank.values()},
            'log': self.log.to_list(),
        }
