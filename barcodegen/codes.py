from __future__ import annotations

import random
import uuid

from .models import FillerKind, RunConfig

_system_random = random.SystemRandom()


def render_filler(filler: FillerKind, rng: random.Random | None = None) -> str:
    """Return the middle part of a code: a fresh UUID or nothing.

    Every call with ``FillerKind.UUID`` draws 128 new bits from *rng*, so two
    calls never share an identifier in practice.
    """
    if filler is FillerKind.UUID:
        rng = rng or _system_random
        return str(uuid.UUID(int=rng.getrandbits(128), version=4))
    return ""


def build_code_text(config: RunConfig, rng: random.Random | None = None) -> str:
    suffix = config.suffix or ""
    return f"{config.prefix}{render_filler(config.filler, rng)}{suffix}}}"
