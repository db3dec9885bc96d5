"""Cell type switching simulation: precursor cells grow, divide and differentiate."""

__all__ = [
    "config",
    "models",
    "behavior",
    "lineage",
    "io",
    "analysis",
]
