from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional

Environment = Mapping[str, str]

# Default garden conditions.
ENVIRONMENT_FACTORS: Dict[str, str] = {
    "sun": "low",
    "wind": "medium",
}

LEVELS = ("low", "medium", "high")


def parse_environment(pairs: Iterable[str], base: Optional[Environment] = None) -> Dict[str, str]:
    """Build an environment from FACTOR=LEVEL strings layered over `base`."""
    env = dict(ENVIRONMENT_FACTORS if base is None else base)
    for pair in pairs:
        factor, sep, level = pair.partition("=")
        factor, level = factor.strip().lower(), level.strip().lower()
        if not sep or not factor or not level:
            raise ValueError(f"Environment setting must look like FACTOR=LEVEL, got '{pair}'.")
        env[factor] = level
    return env
