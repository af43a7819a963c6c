from __future__ import annotations
import json, xml.etree.ElementTree as ET
from typing import Dict, List
from .manifest import Finding
from .measurement_log import MeasurementLog
from .simulator import PcrSimulator

def render_bank(sim: PcrSimulator)->str:
    lines = [f'PCR bank ({sim.algorithm.value}, {sim.algorithm.output_size} bytes)']
    lines += [f'  PCR{i:<2} {v}' for i, v in sim.get_all_pcr_values()]
    return '\n'.join(lines)

def render_log(mlog: MeasurementLog)->str:
    if not mlog: return 'Measurement log is empty'
    return '\n'.join(f'#{n}: PCR{e.pcr_index} {e.description} {e.raw.hex()}' for n, e in enumerate(mlog, 1))

def render_text(findings: List[Finding], values: Dict[int, str])->str:
    lines = [f'PCR{i}: {v}' for i, v in values.items()]
    if not findings:
        lines.append('OK: no mismatches'); return '\n'.join(lines)
    lines += [f'{f.severity.upper()} {f.kind} {f.id} - {f.message}' for f in findings]
    lines.append(f'Total: {len(findings)}')
    return '\n'.join(lines)

def render_json(findings: List[Finding], values: Dict[int, str])->str:
    data = {'version':1,'$schema':'schema://pcrsim/findings.json','pcrs':{str(i):v for i,v in values.items()},'findings':[f.__dict__ for f in findings],'summary':{'total':len(findings)}}
    return json.dumps(data, indent=2)

def render_junit(findings: List[Finding], values: Dict[int, str])->str:
    suite = ET.Element('testsuite', name='pcrsim', tests=str(max(1, len(findings))), failures=str(len(findings)))
    if not findings:
        case = ET.SubElement(suite, 'testcase', classname='replay', name='manifest')
        out = ET.SubElement(case, 'system-out'); out.text = '\n'.join(f'PCR{i}: {v}' for i, v in values.items())
    else:
        for f in findings:
            case = ET.SubElement(suite, 'testcase', classname=f.kind, name=f.id)
            fail = ET.SubElement(case, 'failure', message=f.message); fail.text = f'{f.kind}:{f.id}:{f.severity}'
    return ET.tostring(suite, encoding='unicode')

RENDERERS = {'text': render_text, 'json': render_json, 'junit': render_junit}
