from .blowfish import Blowfish, BLOCK_SIZE, KEY_LENGTH, check_key

DUMMY = lambda s: s

class BaseCipher(object):
    PYTHON = False
    BLOCK_SIZE = BLOCK_SIZE
    def __init__(self, key):
        self.key = check_key(key, key_length=self.KEY_LENGTH)
        self.setup()
    def process(self, crypt, s):
        s = s.to_bytes(self.BLOCK_SIZE, 'big') if isinstance(s, int) else bytes(s)
        n = len(s) - len(s) % self.BLOCK_SIZE
        return crypt(s[:n]) + s[n:] if n else s
    def encrypt(self, s):
        return self.process(self.cipher.encrypt, s)
    def decrypt(self, s):
        return self.process(self.cipher.decrypt, s)
    @classmethod
    def name(cls):
        return cls.__name__.replace('_Py_Cipher', '').replace('_Cipher', '').replace('_', '-').lower()

class BF_ECB_Cipher(BaseCipher):
    KEY_LENGTH = KEY_LENGTH
    def setup(self):
        from Crypto.Cipher import Blowfish as BF
        self.cipher = BF.new(self.key, BF.MODE_ECB)

class BF_ECB_Py_Cipher(BaseCipher):
    PYTHON = True
    KEY_LENGTH = (1, None)
    def setup(self):
        self.cipher = Blowfish.new(self.key)
    def encrypt(self, s):
        return self.cipher.encrypt(s)
    def decrypt(self, s):
        return self.cipher.decrypt(s)

MAP = {cls.name(): cls for name, cls in globals().items() if name.endswith('_Cipher') and not name.endswith('_Py_Cipher')}
MAP_PY = {cls.name(): cls for name, cls in globals().items() if name.endswith('_Py_Cipher')}

def accelerated():
    try:
        return __import__('Crypto').version_info >= (3, 4)
    except Exception:
        return False

def get_cipher(cipher_name, verbose=DUMMY):
    if cipher_name not in MAP and cipher_name not in MAP_PY and not (cipher_name.endswith('-py') and cipher_name[:-3] in MAP_PY):
        return f'existing ciphers: {sorted(set(MAP)|set(MAP_PY))}', None
    cipher = None if cipher_name.endswith('-py') else MAP.get(cipher_name)
    if cipher and not accelerated():
        verbose(f'{cipher_name}: pycryptodome not available, using pure python')
        cipher = None
    if cipher is None:
        cipher = MAP_PY.get(cipher_name[:-3] if cipher_name.endswith('-py') else cipher_name)
    verbose(f'{cipher_name} -> {cipher.__name__}')
    return None, cipher
