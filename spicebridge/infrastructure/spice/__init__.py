# spicebridge/infrastructure/spice/__init__.py
from .bridge import ErrorStateBridge, bridge
from .decorators import spice_call, spice_lookup
from .marshaling import (
    cell_to_ints,
    cell_to_windows,
    from_raw,
    to_raw,
    window_to_cell,
)

__all__ = [
    "ErrorStateBridge",
    "bridge",
    "spice_call",
    "spice_lookup",
    "cell_to_ints",
    "cell_to_windows",
    "from_raw",
    "to_raw",
    "window_to_cell",
]
