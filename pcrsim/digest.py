from __future__ import annotations
import abc, enum, hashlib
from typing import Dict, Optional
from gmssl import sm3, func

class Algorithm(enum.Enum):
    SHA1 = 'SHA1'
    SHA256 = 'SHA256'
    SHA384 = 'SHA384'
    SHA512 = 'SHA512'
    SHA3_256 = 'SHA3-256'
    SHA3_384 = 'SHA3-384'
    SHA3_512 = 'SHA3-512'
    SM3 = 'SM3'

    @property
    def output_size(self)->int:
        return OUTPUT_SIZES[self]

    @property
    def tcg_alg_id(self)->int:
        return TCG_ALG_IDS[self]

    @classmethod
    def from_name(cls, name: str)->Optional['Algorithm']:
        return _NAMES.get(name.strip().lower())

OUTPUT_SIZES = {
    Algorithm.SHA1: 20, Algorithm.SHA256: 32, Algorithm.SHA384: 48, Algorithm.SHA512: 64,
    Algorithm.SHA3_256: 32, Algorithm.SHA3_384: 48, Algorithm.SHA3_512: 64, Algorithm.SM3: 32,
}

# TPM_ALG_ID values from the TCG algorithm registry
TCG_ALG_IDS = {
    Algorithm.SHA1: 0x0004, Algorithm.SHA256: 0x000B, Algorithm.SHA384: 0x000C, Algorithm.SHA512: 0x000D,
    Algorithm.SM3: 0x0012, Algorithm.SHA3_256: 0x0027, Algorithm.SHA3_384: 0x0028, Algorithm.SHA3_512: 0x0029,
}

_NAMES = {
    'sha1': Algorithm.SHA1, 'sha256': Algorithm.SHA256, 'sha384': Algorithm.SHA384, 'sha512': Algorithm.SHA512,
    'sha3-256': Algorithm.SHA3_256, 'sha3_256': Algorithm.SHA3_256,
    'sha3-384': Algorithm.SHA3_384, 'sha3_384': Algorithm.SHA3_384,
    'sha3-512': Algorithm.SHA3_512, 'sha3_512': Algorithm.SHA3_512,
    'sm3': Algorithm.SM3,
}


class Digest(abc.ABC):
    """One-way hash capability: bytes in, ``output_size`` bytes out.

    The PCR bank only talks to this interface, so adding an algorithm means
    adding a provider here and nothing in the chaining code.
    """

    def __init__(self, algorithm: Algorithm):
        self.algorithm = algorithm
        self.output_size = algorithm.output_size

    @abc.abstractmethod
    def digest(self, data: bytes)->bytes:
        ...

    def __repr__(self)->str:
        return f'{type(self).__name__}({self.algorithm.value})'


class HashlibDigest(Digest):
    def __init__(self, algorithm: Algorithm, hashlib_name: str):
        super().__init__(algorithm)
        self.hashlib_name = hashlib_name

    def digest(self, data: bytes)->bytes:
        return hashlib.new(self.hashlib_name, data).digest()


class Sm3Digest(Digest):
    def __init__(self):
        super().__init__(Algorithm.SM3)

    def digest(self, data: bytes)->bytes:
        return bytes.fromhex(sm3.sm3_hash(func.bytes_to_list(data)))


_PROVIDERS: Dict[Algorithm, Digest] = {
    Algorithm.SHA1: HashlibDigest(Algorithm.SHA1, 'sha1'),
    Algorithm.SHA256: HashlibDigest(Algorithm.SHA256, 'sha256'),
    Algorithm.SHA384: HashlibDigest(Algorithm.SHA384, 'sha384'),
    Algorithm.SHA512: HashlibDigest(Algorithm.SHA512, 'sha512'),
    Algorithm.SHA3_256: HashlibDigest(Algorithm.SHA3_256, 'sha3_256'),
    Algorithm.SHA3_384: HashlibDigest(Algorithm.SHA3_384, 'sha3_384'),
    Algorithm.SHA3_512: HashlibDigest(Algorithm.SHA3_512, 'sha3_512'),
    Algorithm.SM3: Sm3Digest(),
}

def digest_for(algorithm: Algorithm)->Digest:
    return _PROVIDERS[algorithm]
