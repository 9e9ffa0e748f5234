HASH_RADIX = 27

# "a" maps to 1
CHAR_DISPLACEMENT = 96

INVALID_HASH = -1


def char_code(c: str) -> int:
    return ord(c) - CHAR_DISPLACEMENT


def horner_hash(key: str, capacity: int) -> int:
    """Hash `key` into [0, capacity) with Horner's rule.

    Only the first character's code is made non-negative; later codes are
    added signed and the running sum is reduced modulo `capacity` at every
    step, so a sum that goes negative wraps back into range.
    """
    if len(key) == 0:
        return 0

    hash = abs(char_code(key[0])) % capacity
    for i in range(1, len(key)):
        hash = (char_code(key[i]) + HASH_RADIX * hash) % capacity
    return hash


def horner_hash_folded(key: str, capacity: int) -> int:
    """Like `horner_hash`, but every character code is made non-negative."""
    if len(key) == 0:
        return 0

    hash = 0
    for i in range(len(key)):
        hash = (abs(char_code(key[i])) + HASH_RADIX * hash) % capacity
    return hash


def is_prime(n: int) -> bool:
    if n < 2:
        return False

    for i in range(2, n // 2 + 1):
        if n % i == 0:
            return False
    return True


def next_prime(n: int) -> int:
    while not is_prime(n):
        n += 1
    return n
