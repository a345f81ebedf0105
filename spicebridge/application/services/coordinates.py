"""Conversions between rectangular and curvilinear coordinate systems."""

import spiceypy as spice

from spicebridge.domain.constants import EARTH_EQUATORIAL_RADIUS_KM, EARTH_FLATTENING
from spicebridge.domain.models.units import Angle, Distance
from spicebridge.domain.models.vectors import (
    AzElVector,
    CylindricalVector,
    DistanceVector,
    GeodeticVector,
    GeodeticVectorRates,
    LatitudinalVector,
    PlanetographicVector,
    RADecVector,
    SphericalVector,
    StateVector,
)
from spicebridge.infrastructure.spice.decorators import spice_call
from spicebridge.infrastructure.spice.marshaling import from_raw, to_raw

EARTH_RE = Distance(EARTH_EQUATORIAL_RADIUS_KM)


@spice_call
def reclat(rectan: DistanceVector) -> LatitudinalVector:
    return from_raw(LatitudinalVector, spice.reclat(to_raw(rectan)))


@spice_call
def latrec(latvec: LatitudinalVector) -> DistanceVector:
    return from_raw(DistanceVector, spice.latrec(*to_raw(latvec)))


@spice_call
def recsph(rectan: DistanceVector) -> SphericalVector:
    return from_raw(SphericalVector, spice.recsph(to_raw(rectan)))


@spice_call
def sphrec(sphvec: SphericalVector) -> DistanceVector:
    return from_raw(DistanceVector, spice.sphrec(*to_raw(sphvec)))


@spice_call
def reccyl(rectan: DistanceVector) -> CylindricalVector:
    return from_raw(CylindricalVector, spice.reccyl(to_raw(rectan)))


@spice_call
def cylrec(cylvec: CylindricalVector) -> DistanceVector:
    return from_raw(DistanceVector, spice.cylrec(*to_raw(cylvec)))


@spice_call
def recgeo(
    rectan: DistanceVector,
    re: Distance = EARTH_RE,
    f: float = EARTH_FLATTENING,
) -> GeodeticVector:
    """Rectangular to geodetic coordinates on a spheroid of radius ``re`` and flattening ``f``."""
    return from_raw(GeodeticVector, spice.recgeo(to_raw(rectan), float(re), f))


@spice_call
def georec(
    geovec: GeodeticVector,
    re: Distance = EARTH_RE,
    f: float = EARTH_FLATTENING,
) -> DistanceVector:
    """Geodetic to rectangular. ``re`` must be positive and ``f`` below 1."""
    lon, lat, alt = to_raw(geovec)
    return from_raw(DistanceVector, spice.georec(lon, lat, alt, float(re), f))


@spice_call
def recrad(rectan: DistanceVector) -> RADecVector:
    return from_raw(RADecVector, spice.recrad(to_raw(rectan)))


@spice_call
def radrec(radec: RADecVector) -> DistanceVector:
    return from_raw(DistanceVector, spice.radrec(*to_raw(radec)))


@spice_call
def recazl(
    rectan: DistanceVector, azccw: bool = False, elplsz: bool = True
) -> AzElVector:
    """
    Rectangular to range, azimuth and elevation. ``azccw`` counts azimuth
    counterclockwise about +Z; ``elplsz`` makes elevation positive toward +Z.
    """
    return from_raw(AzElVector, spice.recazl(to_raw(rectan), azccw, elplsz))


@spice_call
def azlrec(
    azlvec: AzElVector, azccw: bool = False, elplsz: bool = True
) -> DistanceVector:
    return from_raw(DistanceVector, spice.azlrec(*to_raw(azlvec), azccw, elplsz))


@spice_call
def recpgr(
    body: str,
    rectan: DistanceVector,
    re: Distance = EARTH_RE,
    f: float = EARTH_FLATTENING,
) -> PlanetographicVector:
    """Planetographic longitude follows the body's rotation sense from the kernel pool."""
    return from_raw(PlanetographicVector, spice.recpgr(body, to_raw(rectan), float(re), f))


@spice_call
def pgrrec(
    body: str,
    pgrvec: PlanetographicVector,
    re: Distance = EARTH_RE,
    f: float = EARTH_FLATTENING,
) -> DistanceVector:
    lon, lat, alt = to_raw(pgrvec)
    return from_raw(DistanceVector, spice.pgrrec(body, lon, lat, alt, float(re), f))


@spice_call
def geodetic_rates(
    state: StateVector,
    re: Distance = EARTH_RE,
    f: float = EARTH_FLATTENING,
) -> GeodeticVectorRates:
    """Rates of change of geodetic longitude, latitude and altitude along a state."""
    x, y, z = to_raw(state.r)
    jacobi = spice.dgeodr(x, y, z, float(re), f)
    return from_raw(GeodeticVectorRates, spice.mxv(jacobi, to_raw(state.v)))
