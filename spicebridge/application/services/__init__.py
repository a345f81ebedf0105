# spicebridge/application/services/__init__.py
"""
The call-wrapper catalogue, one module per area. Every toolkit-facing entry
point returns a CallResult or LookupResult; see spicebridge.domain.models.results.
"""
from . import (
    admin,
    constants,
    coordinates,
    coverage,
    ephemeris,
    files,
    fov,
    frames,
    geometry,
    ids,
    kernels,
    orbits,
    pool,
    rotation,
    sclk,
    search,
    time,
    tle,
    vectors,
)

__all__ = [
    "admin",
    "constants",
    "coordinates",
    "coverage",
    "ephemeris",
    "files",
    "fov",
    "frames",
    "geometry",
    "ids",
    "kernels",
    "orbits",
    "pool",
    "rotation",
    "sclk",
    "search",
    "time",
    "tle",
    "vectors",
]
