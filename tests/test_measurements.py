import pytest
from pcrsim.measurements import validate_hex, decode_hex, parse_file_lines, scan_lines, load_measurement_file
from pcrsim.errors import InvalidCharacter, InvalidHexInput, MeasurementTooLong, FileReadError

def test_validate_pads_to_64():
    assert validate_hex('deadbeef') == '0'*56 + 'deadbeef'
    assert validate_hex(' de ad\tbe ef\n') == '0'*56 + 'deadbeef'
    assert validate_hex('a'*64) == 'a'*64

def test_validate_rejects():
    with pytest.raises(MeasurementTooLong): validate_hex('a'*65)
    with pytest.raises(InvalidCharacter): validate_hex('xyz')
    with pytest.raises(InvalidHexInput): validate_hex('12g4')

def test_decode_hex():
    assert decode_hex('00ff') == b'\x00\xff'
    assert decode_hex('') == b''
    with pytest.raises(InvalidHexInput): decode_hex('abc')
    with pytest.raises(InvalidHexInput): decode_hex('zz')
    with pytest.raises(InvalidHexInput): decode_hex('00 11')

def test_parse_file_lines():
    out = parse_file_lines(['# comment', '', 'deadbeef', 'zzzz', '   '])
    assert out == ['0'*56 + 'deadbeef']

def test_embedded_spaces_and_counter():
    scan = scan_lines(['de ad be ef', 'a'*65, 'not hex', '# x', '', '  01  '])
    assert scan.measurements == ['0'*56 + 'deadbeef', '0'*62 + '01']
    assert scan.skipped == 2

def test_load_file(tmp_path):
    p = tmp_path / 'm.txt'
    p.write_text('# boot\nAA\n\nnope\nbb cc\n', encoding='utf-8')
    mf = load_measurement_file(str(p))
    assert mf.measurements == ['0'*62 + 'AA', '0'*60 + 'bbcc']
    assert mf.skipped == 1 and len(mf.lines) == 5

def test_binary_file_yields_nothing(tmp_path):
    p = tmp_path / 'blob.bin'
    p.write_bytes(b'\xff\xfe\x00\x81garbage\x9f')
    mf = load_measurement_file(str(p))
    assert mf.measurements == []

def test_missing_file(tmp_path):
    with pytest.raises(FileReadError): load_measurement_file(str(tmp_path / 'absent.txt'))
