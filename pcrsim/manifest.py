from __future__ import annotations
import json, os, time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from importlib import resources
from jsonschema import validate as jsonschema_validate, ValidationError

from .digest import Algorithm
from .errors import SimulatorError, ManifestError
from .simulator import PcrSimulator

@dataclass
class PcrReplay:
    measurements: List[str]
    expected: Optional[str] = None

@dataclass
class Manifest:
    algorithm: Algorithm
    pcrs: Dict[int, PcrReplay] = field(default_factory=dict)

@dataclass
class Finding:
    kind: str
    id: str
    severity: str
    message: str

def _schema(name: str)->dict:
    return json.loads(resources.read_text('pcrsim.schemas', f'{name}.schema.json'))

def _validate(obj: Any, name: str)->None:
    try:
        jsonschema_validate(obj, _schema(name))
    except ValidationError as e:
        raise ManifestError(f'{name} schema validation failed: {e.message}')

def parse_manifest(obj: Any)->Manifest:
    _validate(obj, 'manifest')
    alg = Algorithm.from_name(obj['algorithm'])
    if alg is None: raise ManifestError(f'unknown algorithm {obj["algorithm"]!r}')
    pcrs = {int(i): PcrReplay(list(p['measurements']), p.get('expected')) for i, p in obj['pcrs'].items()}
    return Manifest(alg, dict(sorted(pcrs.items())))

def load_manifest(path: str)->Manifest:
    try:
        with open(path, 'r', encoding='utf-8') as f: obj = json.load(f)
    except OSError as e:
        raise ManifestError(f'cannot read manifest {path}: {e.strerror or e}')
    except json.JSONDecodeError as e:
        raise ManifestError(f'manifest {path} is not valid JSON: {e}')
    return parse_manifest(obj)

def verify_manifest(manifest: Manifest)->Tuple[Dict[int, str], List[Finding]]:
    sim = PcrSimulator(manifest.algorithm)
    values: Dict[int, str] = {}
    finds: List[Finding] = []
    for idx, rp in manifest.pcrs.items():
        pid = f'PCR{idx}.{manifest.algorithm.value}'
        try:
            got = sim.replay(idx, rp.measurements)
        except SimulatorError as e:
            finds.append(Finding('replay-error', pid, 'critical', str(e)))
            continue
        values[idx] = got
        if rp.expected is not None and rp.expected.lower() != got:
            finds.append(Finding('pcr-mismatch', pid, 'high', f'expected {rp.expected.lower()}, got {got}'))
    return values, finds

def snapshot_document(sim: PcrSimulator)->Dict[str, Any]:
    obj = sim.snapshot()
    obj.update({'$schema': 'schema://pcrsim/snapshot.json', 'schema_version': 1, 'created_at': int(time.time())})
    return obj

def save_snapshot(sim: PcrSimulator, path: str)->None:
    obj = snapshot_document(sim)
    _validate(obj, 'snapshot')
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f: json.dump(obj, f, indent=2)
