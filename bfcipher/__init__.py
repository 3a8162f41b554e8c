from .__doc__ import *
from .blowfish import Blowfish, InvalidKeyError, BLOCK_SIZE, ROUNDS, MIN_KEY_LENGTH, MAX_KEY_LENGTH, initialize, encrypt, decrypt
from .cipher import MAP, MAP_PY, get_cipher
