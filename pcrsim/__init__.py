from .digest import Algorithm, Digest, digest_for
from .errors import SimulatorError, InvalidIndex, InvalidHexInput, InvalidCharacter, MeasurementTooLong, FileReadError, ManifestError
from .hashcalc import InputKind, calculate_hash
from .measurements import validate_hex, decode_hex, parse_file_lines, scan_lines, load_measurement_file
from .measurement_log import LogEntry, MeasurementLog
from .pcr import PcrBank, NUM_PCRS
from .simulator import PcrSimulator
from .manifest import load_manifest, verify_manifest, save_snapshot
from .version import get_version
__all__=['Algorithm','Digest','digest_for','SimulatorError','InvalidIndex','InvalidHexInput','InvalidCharacter','MeasurementTooLong','FileReadError','ManifestError','InputKind','calculate_hash','validate_hex','decode_hex','parse_file_lines','scan_lines','load_measurement_file','LogEntry','MeasurementLog','PcrBank','NUM_PCRS','PcrSimulator','load_manifest','verify_manifest','save_snapshot','__version__']
__version__=get_version()
