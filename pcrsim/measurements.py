from __future__ import annotations
import binascii, logging, re
from dataclasses import dataclass, field
from typing import Iterable, List
from .errors import InvalidHexInput, InvalidCharacter, MeasurementTooLong, FileReadError

logger = logging.getLogger(__name__)

MEASUREMENT_HEX_LEN = 64
_HEX_RE = re.compile(r'[0-9a-fA-F]*')

@dataclass
class LineScan:
    measurements: List[str] = field(default_factory=list)
    skipped: int = 0

@dataclass
class MeasurementFile:
    path: str
    lines: List[str]
    measurements: List[str]
    skipped: int

def validate_hex(text: str)->str:
    hex_only = ''.join(text.split())
    if len(hex_only) > MEASUREMENT_HEX_LEN:
        raise MeasurementTooLong(f'measurement must be at most {MEASUREMENT_HEX_LEN} hex characters, got {len(hex_only)}')
    if not _HEX_RE.fullmatch(hex_only):
        raise InvalidCharacter(f'invalid hex characters in {hex_only!r}')
    return hex_only.rjust(MEASUREMENT_HEX_LEN, '0')

def decode_hex(text: str)->bytes:
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as e:
        raise InvalidHexInput(f'failed to decode measurement: {e}')

def parse_hex(text: str)->bytes:
    return decode_hex(text.strip().replace(' ', ''))

def scan_lines(lines: Iterable[str])->LineScan:
    scan = LineScan()
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith('#'): continue
        hex_only = line.replace(' ', '')
        if hex_only and _HEX_RE.fullmatch(hex_only):
            try:
                scan.measurements.append(validate_hex(hex_only)); continue
            except MeasurementTooLong:
                pass
        scan.skipped += 1
    return scan

def parse_file_lines(lines: Iterable[str])->List[str]:
    return scan_lines(lines).measurements

def load_measurement_file(path: str)->MeasurementFile:
    try:
        # undecodable bytes become U+FFFD and fail the per-line hex check
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e))
    scan = scan_lines(lines)
    logger.info('loaded %s: %d measurements, %d lines skipped', path, len(scan.measurements), scan.skipped)
    return MeasurementFile(path, lines, scan.measurements, scan.skipped)
