from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple

@dataclass(frozen=True)
class LogEntry:
    description: str
    raw: bytes
    pcr_index: int

    def to_dict(self)->Dict[str, Any]:
        return {'description': self.description, 'measurement': self.raw.hex(), 'pcr': self.pcr_index}

class MeasurementLog:
    def __init__(self):
        self._entries: List[LogEntry] = []

    def append(self, description: str, raw: bytes, pcr_index: int)->LogEntry:
        entry = LogEntry(description, bytes(raw), pcr_index)
        self._entries.append(entry)
        return entry

    def clear(self)->None:
        self._entries.clear()

    @property
    def entries(self)->Tuple[LogEntry, ...]:
        return tuple(self._entries)

    def for_pcr(self, pcr_index: int)->List[LogEntry]:
        return [e for e in self._entries if e.pcr_index == pcr_index]

    def pcr_indices(self)->List[int]:
        return sorted({e.pcr_index for e in self._entries})

    def to_list(self)->List[Dict[str, Any]]:
        return [e.to_dict() for e in self._entries]

    def __iter__(self)->Iterator[LogEntry]:
        return iter(self.entries)

    def __len__(self)->int:
        return len(self._entries)

    def __bool__(self)->bool:
        return bool(self._entries)
