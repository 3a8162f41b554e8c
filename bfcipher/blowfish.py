import math, struct

from .constants import initial_state, P_LENGTH, S_LENGTH, S_OFFSETS, STATE_LENGTH

BLOCK_SIZE = 8
ROUNDS = 16
MIN_KEY_LENGTH = 4
MAX_KEY_LENGTH = 56
KEY_LENGTH = (MIN_KEY_LENGTH, MAX_KEY_LENGTH)
MASK = 0xffffffff

S0, S1, S2, S3 = S_OFFSETS

class InvalidKeyError(ValueError):
    pass

def key_words(key):
    """Pack `key` into the shortest cycle of 32-bit words, first byte most significant."""
    length = len(key)
    return [key[i*4%length]<<24 | key[(i*4+1)%length]<<16 | key[(i*4+2)%length]<<8 | key[(i*4+3)%length]
            for i in range(length // math.gcd(length, 4))]

def feistel(p, x):
    return ((p[S0+(x>>24)] + p[S1+(x>>16&0xff)] & MASK) ^ p[S2+(x>>8&0xff)]) + p[S3+(x&0xff)] & MASK

def encrypt_block(p, left, right):
    for i in range(ROUNDS):
        left ^= p[i]
        right ^= feistel(p, left)
        left, right = right, left
    left, right = right, left
    return left ^ p[17], right ^ p[16]

def decrypt_block(p, left, right):
    for i in range(ROUNDS):
        left ^= p[17-i]
        right ^= feistel(p, left)
        left, right = right, left
    left, right = right, left
    return left ^ p[0], right ^ p[1]

def check_key(key, length=None, key_length=(1, None)):
    try:
        key = bytes(memoryview(key))
    except TypeError:
        raise InvalidKeyError(f'Blowfish key must be bytes-like, got: {type(key).__name__}') from None
    length = len(key) if length is None else length
    if length <= 0:
        raise InvalidKeyError(f'Blowfish key length must be positive, got: {length}')
    if length > len(key):
        raise InvalidKeyError(f'Blowfish key length {length} exceeds key size {len(key)}')
    low, high = key_length
    if length < low or high is not None and length > high:
        raise InvalidKeyError(f'Blowfish key size must be between {low} and {high or "any"}, got: {length}')
    return key[:length]

def key_schedule(key):
    p = list(initial_state())
    words = key_words(key)
    for i in range(P_LENGTH):
        p[i] ^= words[i % len(words)]
    left = right = 0
    for i in range(0, STATE_LENGTH, 2):
        left, right = encrypt_block(p, left, right)
        p[i], p[i+1] = left, right
    return tuple(p)

class RAW:
    CACHE = {}
    @classmethod
    def new(cls, key):
        """Return the shared instance for `key`, building it on first use.

        Instances are kept in `CACHE` for the life of the process; nothing is evicted.
        """
        key = check_key(key)
        if key in cls.CACHE:
            return cls.CACHE[key]
        ret = cls.CACHE[key] = cls(key)
        return ret

class Blowfish(RAW):
    """Blowfish keyed state: 18 subkeys and 4 S-boxes in one frozen sequence.

    The first 18 words are the subkeys; S-box `t` starts at `S_OFFSETS[t]`.
    Buffers are processed in ECB fashion, 8 bytes at a time, big-endian halves.
    Bytes after the last complete block are passed through unchanged.
    """
    CACHE = {}
    BLOCK_SIZE = BLOCK_SIZE
    def __init__(self, key, length=None, strict=False):
        self.p = key_schedule(check_key(key, length, KEY_LENGTH if strict else (1, None)))
    @property
    def subkeys(self):
        return self.p[:P_LENGTH]
    @property
    def sboxes(self):
        return tuple(self.p[i:i+S_LENGTH] for i in S_OFFSETS)
    def feistel(self, x):
        return feistel(self.p, x)
    def encrypt_block(self, left, right):
        return encrypt_block(self.p, left, right)
    def decrypt_block(self, left, right):
        return decrypt_block(self.p, left, right)
    def process_into(self, crypt, dst, src=None, length=None):
        src = dst if src is None else src
        length = len(src) if length is None else length
        if length < 0 or length > len(src) or length > len(dst):
            raise ValueError(f'buffer length {length} out of range (src {len(src)}, dst {len(dst)})')
        if src is not dst:
            memoryview(dst)[:length] = memoryview(src)[:length]
        p = self.p
        for i in range(0, length - length % BLOCK_SIZE, BLOCK_SIZE):
            struct.pack_into('>II', dst, i, *crypt(p, *struct.unpack_from('>II', dst, i)))
    def encrypt_into(self, dst, src=None, length=None):
        self.process_into(encrypt_block, dst, src, length)
    def decrypt_into(self, dst, src=None, length=None):
        self.process_into(decrypt_block, dst, src, length)
    def process(self, crypt, s):
        s = s.to_bytes(BLOCK_SIZE, 'big') if isinstance(s, int) else s
        buf = bytearray(s)
        self.process_into(crypt, buf)
        return bytes(buf)
    def encrypt(self, s):
        return self.process(encrypt_block, s)
    def decrypt(self, s):
        return self.process(decrypt_block, s)

def initialize(key, length=None, strict=False):
    return Blowfish(key, length, strict)

def encrypt(state, dst, src, length=None):
    state.encrypt_into(dst, src, length)

def decrypt(state, dst, src, length=None):
    state.decrypt_into(dst, src, length)
