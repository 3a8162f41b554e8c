__title__       = "bfcipher"
__version__     = "1.0.0"
__license__     = "MIT"
__description__ = "Pure python Blowfish block cipher with optional pycryptodome acceleration."
__keywords__    = "blowfish cipher block feistel ecb crypto"
__author__      = "bfcipher contributors"

__all__ = ['__version__', '__description__']
