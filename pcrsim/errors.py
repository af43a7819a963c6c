from __future__ import annotations

class SimulatorError(Exception):
    pass

class InvalidIndex(SimulatorError):
    def __init__(self, index: int):
        super().__init__(f'invalid PCR index: {index}')
        self.index = index

class InvalidHexInput(SimulatorError):
    pass

class InvalidCharacter(InvalidHexInput):
    pass

class MeasurementTooLong(SimulatorError):
    pass

class FileReadError(SimulatorError):
    def __init__(self, path: str, reason: str):
        super().__init__(f'error reading file {path}: {reason}')
        self.path = path
        self.reason = reason

class ManifestError(SimulatorError):
    pass
