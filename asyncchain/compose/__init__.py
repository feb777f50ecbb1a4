from .fmap import fmap, fmap_catching
from .sequence import sequence, sequence_all

__all__ = (
    # Sequence
    "sequence",
    "sequence_all",
    # Map
    "fmap",
    "fmap_catching",
)
