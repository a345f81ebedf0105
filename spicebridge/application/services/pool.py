"""Kernel-pool reads and writes, including body-constant shortcuts."""

from collections.abc import Sequence

import spiceypy as spice

from spicebridge.domain.models.units import Distance, MassConstant
from spicebridge.domain.models.vectors import DimensionlessVector, DistanceVector
from spicebridge.infrastructure.spice.decorators import spice_call, spice_lookup
from spicebridge.infrastructure.spice.marshaling import from_raw

VALUE_LEN = 256


# ── lookups ──


@spice_lookup("pool variable {name}")
def gdpool(name: str = "BODY514_NUT_PREC_RA", start: int = 0, room: int = 7):
    values, found = spice.gdpool(name, start, room)
    return [float(v) for v in values], found


@spice_lookup("pool variable {name}")
def gipool(name: str, start: int = 0, room: int = 1):
    values, found = spice.gipool(name, start, room)
    return [int(v) for v in values], found


@spice_lookup("pool variable {name}")
def gcpool(name: str = "PATH_VALUES", start: int = 0, room: int = 1):
    values, found = spice.gcpool(name, start, room, VALUE_LEN)
    return list(values), found


@spice_lookup("pool variables matching {name}")
def gnpool(name: str = "BODY%%%_*", start: int = 0, room: int = 100):
    """Names of pool variables matching a template (* and % wildcards)."""
    names, found = spice.gnpool(name, start, room, VALUE_LEN)
    return list(names), found


@spice_lookup("pool variable {name}")
def gdpool_scalar(name: str = "BODY514_LONG_AXIS"):
    values, found = spice.gdpool(name, 0, 1)
    return (float(values[0]) if found else 0.0), found


@spice_lookup("pool variable {name}")
def gdpool_distance(name: str = "BODY514_LONG_AXIS"):
    values, found = spice.gdpool(name, 0, 1)
    return Distance(float(values[0]) if found else 0.0), found


@spice_lookup("pool variable {name}")
def gdpool_vector(name: str):
    values, found = spice.gdpool(name, 0, 3)
    if not found:
        return DistanceVector(), found
    return from_raw(DistanceVector, values), found


@spice_lookup("pool variable {name}")
def gdpool_mass(name: str = "BODY399_GM"):
    values, found = spice.gdpool(name, 0, 1)
    return MassConstant(float(values[0]) if found else 0.0), found


# ── writes ──


@spice_call
def pdpool(name: str, dvals: Sequence[float]) -> None:
    spice.pdpool(name, [float(v) for v in dvals])


@spice_call
def pipool(name: str, ivals: Sequence[int]) -> None:
    spice.pipool(name, [int(v) for v in ivals])


@spice_call
def pcpool(name: str, cvals: Sequence[str]) -> None:
    spice.pcpool(name, list(cvals))


@spice_call
def dvpool(name: str) -> None:
    """Delete a variable from the pool."""
    spice.dvpool(name)


# ── body constants ──


@spice_call
def bodvrd(bodynm: str = "EARTH", item: str = "RADII", maxn: int = 3) -> list[float]:
    _, values = spice.bodvrd(bodynm, item, maxn)
    return [float(v) for v in values]


@spice_call
def bodvcd(bodyid: int = 399, item: str = "RADII", maxn: int = 3) -> list[float]:
    _, values = spice.bodvcd(bodyid, item, maxn)
    return [float(v) for v in values]


@spice_call
def bodvrd_scalar(bodynm: str = "EARTH", item: str = "GM") -> float:
    _, values = spice.bodvrd(bodynm, item, 1)
    return float(values[0])


@spice_call
def bodvrd_vector(bodynm: str = "EARTH", item: str = "RADII") -> DimensionlessVector:
    _, values = spice.bodvrd(bodynm, item, 3)
    return from_raw(DimensionlessVector, values)


@spice_call
def bodvrd_distance_vector(bodynm: str = "EARTH", item: str = "RADII") -> DistanceVector:
    _, values = spice.bodvrd(bodynm, item, 3)
    return from_raw(DistanceVector, values)


@spice_call
def bodvrd_mass(bodynm: str = "EARTH", item: str = "GM") -> MassConstant:
    _, values = spice.bodvrd(bodynm, item, 1)
    return MassConstant(float(values[0]))


@spice_call
def bodvcd_mass(bodyid: int = 399, item: str = "GM") -> MassConstant:
    _, values = spice.bodvcd(bodyid, item, 1)
    return MassConstant(float(values[0]))


def flattening(radii: DistanceVector) -> float:
    """Flattening coefficient (Re - Rp) / Re of a body with the given radii."""
    return (radii.x.km - radii.z.km) / radii.x.km
