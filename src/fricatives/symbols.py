"""SAMPA symbol sets used to classify phoneme labels."""

# f, v (labiodental), s, z (alveolar), S, Z (postalveolar)
DEFAULT_FRICATIVES = frozenset({"f", "v", "s", "S", "z", "Z"})

# BAS/MAUS silence marker
DEFAULT_PAUSES = frozenset({"<p:>"})


def parse_symbols(s: str) -> frozenset[str]:
    """Parse a comma-separated symbol list like 'f,v,s' into a set."""
    symbols = frozenset(part.strip() for part in s.split(",") if part.strip())
    if not symbols:
        raise ValueError(f"No symbols in {s!r}")
    return symbols
