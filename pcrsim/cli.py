from __future__ import annotations
import argparse, logging, os, sys
from .version import get_version
from .digest import Algorithm
from .errors import SimulatorError
from .hashcalc import InputKind, calculate_hash
from .manifest import load_manifest, verify_manifest, save_snapshot
from .measurements import load_measurement_file, validate_hex
from .report import RENDERERS, render_bank, render_log
from .simulator import PcrSimulator, DEFAULT_ALGORITHM

def _algorithm(name: str)->Algorithm:
    alg = Algorithm.from_name(name)
    if alg is None: raise argparse.ArgumentTypeError(f'unknown algorithm {name!r}')
    return alg

def _pcr_index(s: str)->int:
    try:
        return int(s, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f'PCR index must be an integer, got {s!r}')

def _parser()->argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='pcrsim')
    p.add_argument('-v', '--verbose', action='store_true', help='debug logging on stderr')
    sub = p.add_subparsers(dest='cmd', required=True)
    alg_kw = dict(type=_algorithm, default=DEFAULT_ALGORITHM, help='digest algorithm (default sha256)')

    ext = sub.add_parser('extend', help='extend measurements into a PCR')
    ext.add_argument('--alg', **alg_kw)
    ext.add_argument('--pcr', type=_pcr_index, required=True, help='PCR index 0-23')
    ext.add_argument('-m', '--measurement', action='append', required=True, help='hex measurement, repeatable')
    ext.add_argument('--pad', action='store_true', help='validate and left-pad each measurement to 32 bytes')
    ext.add_argument('--show-log', action='store_true', help='print the measurement log')
    ext.add_argument('--snapshot', help='write bank snapshot json')

    rp = sub.add_parser('replay', help='replay a measurement file into one PCR')
    rp.add_argument('file', help='text file with one hex measurement per line')
    rp.add_argument('--alg', **alg_kw)
    rp.add_argument('--pcr', type=_pcr_index, required=True, help='PCR index 0-23')
    rp.add_argument('--snapshot', help='write bank snapshot json')

    vf = sub.add_parser('verify', help='replay a manifest and compare expected values')
    vf.add_argument('manifest', help='replay manifest json')
    vf.add_argument('--format', choices=sorted(RENDERERS), default='text')
    vf.add_argument('--output', help='write report to file')

    hs = sub.add_parser('hash', help='one-shot digest of text or hex input')
    hs.add_argument('input')
    hs.add_argument('--alg', **alg_kw)
    hs.add_argument('--input-kind', choices=[k.value for k in InputKind], default=InputKind.TEXT.value)

    sub.add_parser('algorithms', help='list supported algorithms')
    sub.add_parser('version', help='print version')
    return p

def _extend(args)->int:
    sim = PcrSimulator(args.alg)
    for value in args.measurement:
        hex_value = validate_hex(value) if args.pad else value.strip()
        sim.add_measurement(f'Manual Input: {value.strip()}', hex_value, args.pcr)
    print(render_bank(sim))
    if args.show_log: print(render_log(sim.log))
    if args.snapshot:
        save_snapshot(sim, args.snapshot); print(f'Wrote snapshot to {args.snapshot}')
    return 0

def _replay(args)->int:
    mf = load_measurement_file(args.file)
    print(f'Parsed {len(mf.measurements)} valid measurements from file ({mf.skipped} lines skipped)')
    if not mf.measurements:
        print('File does not contain valid measurements'); return 1
    sim = PcrSimulator(args.alg)
    print(f'PCR{args.pcr}: {sim.replay(args.pcr, mf.measurements)}')
    if args.snapshot:
        save_snapshot(sim, args.snapshot); print(f'Wrote snapshot to {args.snapshot}')
    return 0

def _verify(args)->int:
    values, finds = verify_manifest(load_manifest(args.manifest))
    content = RENDERERS[args.format](finds, values)
    if args.output:
        os.makedirs(os.path.dirname(args.output) or '.', exist_ok=True)
        with open(args.output,'w',encoding='utf-8') as f: f.write(content)
    else:
        print(content)
    return 1 if finds else 0

def main(argv: list[str] | None = None)->int:
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format='%(levelname)s %(name)s: %(message)s')
    try:
        if args.cmd == 'extend': return _extend(args)
        if args.cmd == 'replay': return _replay(args)
        if args.cmd == 'verify': return _verify(args)
        if args.cmd == 'hash':
            print(calculate_hash(args.input, InputKind(args.input_kind), args.alg)); return 0
        if args.cmd == 'algorithms':
            for alg in Algorithm: print(f'{alg.value:<9} {alg.output_size:>2} bytes  alg_id=0x{alg.tcg_alg_id:04x}')
            return 0
        if args.cmd == 'version':
            print(get_version()); return 0
        return 2
    except SimulatorError as e:
        print(f'error: {e}', file=sys.stderr); return 2
