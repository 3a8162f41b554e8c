# Blowfish initial state: the hexadecimal digits of the fractional part of pi.
P_LENGTH = 18
S_LENGTH = 256
S_COUNT = 4
STATE_LENGTH = P_LENGTH + S_COUNT*S_LENGTH
S_OFFSETS = tuple(P_LENGTH + i*S_LENGTH for i in range(S_COUNT))

GUARD_BITS = 64

def arctan_inv(x, one):
    total = term = one // x
    x2, n, sign = x*x, 3, -1
    while term:
        term //= x2
        total += sign * (term // n)
        sign, n = -sign, n+2
    return total

def pi_hex_digits(count):
    """First `count` hex digits of pi after the point, exact up to the guard bits."""
    one = 1 << (4*count + GUARD_BITS)
    pi = 16*arctan_inv(5, one) - 4*arctan_inv(239, one)
    return '%0*x' % (count, (pi - 3*one) >> GUARD_BITS)

def pi_words(count):
    digits = pi_hex_digits(8*count)
    return tuple(int(digits[i:i+8], 16) for i in range(0, 8*count, 8))

_STATE = None

def initial_state():
    global _STATE
    if _STATE is None:
        _STATE = pi_words(STATE_LENGTH)
    return _STATE

def __getattr__(name):
    if name == 'P_ARRAY':
        return initial_state()[:P_LENGTH]
    if name == 'S_BOXES':
        state = initial_state()
        return tuple(state[i:i+S_LENGTH] for i in S_OFFSETS)
    raise AttributeError(f'module {__name__!r} has no attribute {name!r}')
