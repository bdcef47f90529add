# Shared test fixtures utilities.
# Deterministic UTF-8 text generators mixing 1-, 2-, 3- and 4-byte characters
# so boundary tests cover every sequence width.

from __future__ import annotations

import random

# One sample per UTF-8 width.
ONE_BYTE = "aZ 9\n"
TWO_BYTE = "ñéßЖ"
THREE_BYTE = "∅⊆⊇₮₢₸"
FOUR_BYTE = "🤗🍋🍠😁😀"

ALPHABET = ONE_BYTE + TWO_BYTE + THREE_BYTE + FOUR_BYTE

# Texts taken from the original scenario set.
MIXED = "🤗🍋🍠ñXwow₮"
MATH = "he∅⊆⊇o"


def rand_text(n: int, seed: int = 42, alphabet: str = ALPHABET) -> str:
    """Generate `n` characters drawn from `alphabet` with a fixed seed."""
    rnd = random.Random(seed)
    return "".join(rnd.choice(alphabet) for _ in range(n))


def rand_utf8(n: int, seed: int = 42) -> bytes:
    """Same as rand_text, already encoded."""
    return rand_text(n, seed=seed).encode("utf-8")


def boundaries(text: str) -> list[int]:
    """Reference byte offsets of every character start plus the end offset."""
    out = [0]
    for ch in text:
        out.append(out[-1] + len(ch.encode("utf-8")))
    return out
