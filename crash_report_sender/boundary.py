from typing import Optional

import random

BOUNDARY_PREFIX = "---------------------------"

_system_random = random.SystemRandom()


def generate_multipart_boundary(rng: Optional[random.Random] = None) -> str:
    """Generate a fresh multipart boundary.

    Four 32-bit values from ``rng`` are appended to a fixed prefix as hex
    digits. ``rng`` defaults to a SystemRandom, pass a seeded Random to get
    a reproducible boundary.
    """
    if rng is None:
        rng = _system_random
    return BOUNDARY_PREFIX + "".join(f"{rng.getrandbits(32):08x}" for _ in range(4))
