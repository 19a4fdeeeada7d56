"""
Numeric tuning knobs for the hex kernel.
Safe to tweak without touching the geometry code.
"""

# Chunking
DEFAULT_CHUNK_RADIUS: int = 8  # 217 cells per chunk

# Worldspace field construction
DEGENERATE_EPS: float = 1e-9  # shortest vector accepted for a basis direction

# Horizontal component of the q and r axes when the s axis is folded into them
HORIZONTAL_BASIS_COEFF: float = -0.5
