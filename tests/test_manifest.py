import hashlib, json
import pytest
from pcrsim.digest import Algorithm
from pcrsim.manifest import parse_manifest, load_manifest, verify_manifest, save_snapshot
from pcrsim.simulator import PcrSimulator
from pcrsim.errors import ManifestError

def _expected(*items):
    v = b'\x00'*32
    for it in items: v = hashlib.sha256(v + bytes.fromhex(it)).digest()
    return v.hex()

def test_parse_manifest():
    m = parse_manifest({'algorithm':'sha3_256','pcrs':{'7':{'measurements':['aa']},'0':{'measurements':[],'expected':'AB'}}})
    assert m.algorithm is Algorithm.SHA3_256
    assert list(m.pcrs) == [0, 7]
    assert m.pcrs[0].expected == 'AB' and m.pcrs[7].expected is None

@pytest.mark.parametrize('obj', [
    {'pcrs':{}},
    {'algorithm':'sha256','pcrs':{'24':{'measurements':[]}}},
    {'algorithm':'sha256','pcrs':{'1':{}}},
    {'algorithm':'sha256','pcrs':{},'extra':1},
    {'algorithm':'md5','pcrs':{}},
])
def test_bad_manifest(obj):
    with pytest.raises(ManifestError): parse_manifest(obj)

def test_load_manifest_errors(tmp_path):
    with pytest.raises(ManifestError): load_manifest(str(tmp_path / 'none.json'))
    p = tmp_path / 'bad.json'; p.write_text('{not json', encoding='utf-8')
    with pytest.raises(ManifestError): load_manifest(str(p))

def test_verify_ok_and_mismatch():
    m = parse_manifest({'algorithm':'sha256','pcrs':{
        '0':{'measurements':['00','01'],'expected':_expected('00','01')},
        '1':{'measurements':['00'],'expected':_expected('01')},
    }})
    values, finds = verify_manifest(m)
    assert values[0] == _expected('00','01')
    assert [(f.kind, f.id) for f in finds] == [('pcr-mismatch', 'PCR1.SHA256')]

def test_verify_replay_error():
    values, finds = verify_manifest(parse_manifest({'algorithm':'sha1','pcrs':{'4':{'measurements':['aa','q']}}}))
    assert 4 not in values
    assert finds[0].kind == 'replay-error' and finds[0].severity == 'critical'

def test_save_snapshot(tmp_path):
    sim = PcrSimulator(Algorithm.SHA384)
    sim.add_measurement('kernel', 'beef', 8)
    out = tmp_path / 'snap' / 'bank.json'
    save_snapshot(sim, str(out))
    obj = json.loads(out.read_text(encoding='utf-8'))
    assert obj['algorithm'] == 'SHA384' and len(obj['pcrs']) == 24
    assert obj['log'] == [{'description':'kernel','measurement':'beef','pcr':8}]
    assert obj['pcrs']['8'] == sim.get_pcr_hex(8)
