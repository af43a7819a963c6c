import hashlib
import pytest
from pcrsim.digest import Algorithm, digest_for

SIZES = {'sha1':20,'sha256':32,'sha384':48,'sha512':64,'sha3-256':32,'sha3-384':48,'sha3-512':64,'sm3':32}

@pytest.mark.parametrize('name,size', SIZES.items())
def test_output_sizes(name, size):
    alg = Algorithm.from_name(name)
    assert alg.output_size == size
    assert len(digest_for(alg).digest(b'pcr')) == size

def test_lookup_is_case_insensitive_and_accepts_underscores():
    assert Algorithm.from_name('SHA256') is Algorithm.SHA256
    assert Algorithm.from_name('Sha3_384') is Algorithm.SHA3_384
    assert Algorithm.from_name('sha3-512') is Algorithm.SHA3_512
    assert Algorithm.from_name('SM3') is Algorithm.SM3

def test_unknown_name_is_none():
    assert Algorithm.from_name('md5') is None
    assert Algorithm.from_name('sha224') is None

def test_matches_hashlib():
    d = digest_for(Algorithm.SHA3_256)
    assert d.digest(b'abc') == hashlib.sha3_256(b'abc').digest()
    assert digest_for(Algorithm.SHA1).digest(b'') == hashlib.sha1(b'').digest()

def test_sm3_vector():
    assert digest_for(Algorithm.SM3).digest(b'abc').hex() == '66c7f0f462eeedd9d1f2d46bdc10e4e24167c4875cf2f7a2297da02b8f4ba8e0'

def test_digest_is_abstract():
    from pcrsim.digest import Digest
    with pytest.raises(TypeError): Digest(Algorithm.SHA256)
    class Partial(Digest):
        pass
    with pytest.raises(TypeError): Partial(Algorithm.SHA256)
