"""
Surface geometry: sub-points, ray intercepts, illumination, occultation,
and ellipsoid/plane/ellipse primitives.

Shape and method words accept an optional list of DSK surface names; when
given they are appended as ``/SURFACES = a, b``.
"""

from collections.abc import Sequence

import spiceypy as spice

from spicebridge.domain.models.enums import (
    AberrationCorrection,
    GeometricModel,
    OccultationType,
    SubpointMethod,
)
from spicebridge.domain.models.geometry import Ellipse, Plane
from spicebridge.domain.models.records import (
    IlluminationAngles,
    IlluminationConditions,
    SurfacePoint,
)
from spicebridge.domain.models.units import Angle, Distance, EphemerisTime
from spicebridge.domain.models.vectors import DimensionlessVector, DistanceVector
from spicebridge.domain.validators import option_word
from spicebridge.infrastructure.spice.decorators import spice_call, spice_lookup
from spicebridge.infrastructure.spice.marshaling import from_raw, to_raw


def with_surfaces(word: str, surfaces: Sequence[str] = ()) -> str:
    if not surfaces:
        return word
    return f"{word}/SURFACES = {', '.join(surfaces)}"


def _surface_point(spoint, trgepc, srfvec) -> SurfacePoint:
    return SurfacePoint(
        from_raw(DistanceVector, spoint),
        EphemerisTime(trgepc),
        from_raw(DistanceVector, srfvec),
    )


def _plane_struct(plane: Plane):
    return spice.nvc2pl(to_raw(plane.normal), float(plane.constant))


def _plane(struct) -> Plane:
    normal, constant = spice.pl2nvc(struct)
    return Plane(from_raw(DimensionlessVector, normal), Distance(constant))


def _ellipse_struct(ellipse: Ellipse):
    return spice.cgv2el(to_raw(ellipse.center), to_raw(ellipse.major), to_raw(ellipse.minor))


def _ellipse(struct) -> Ellipse:
    center, smajor, sminor = spice.el2cgv(struct)
    return Ellipse(
        from_raw(DistanceVector, center),
        from_raw(DistanceVector, smajor),
        from_raw(DistanceVector, sminor),
    )


@spice_call
def subpnt(
    et: EphemerisTime,
    surfaces: Sequence[str] = (),
    method: SubpointMethod = SubpointMethod.NEAR_POINT_ELLIPSOID,
    target: str = "MARS",
    fixref: str = "IAU_MARS",
    abcorr: AberrationCorrection = AberrationCorrection.LT_S,
    obsrvr: str = "MGS",
) -> SurfacePoint:
    """Sub-observer point on ``target``."""
    spoint, trgepc, srfvec = spice.subpnt(
        with_surfaces(option_word(SubpointMethod, method), surfaces),
        target,
        float(et),
        fixref,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
    )
    return _surface_point(spoint, trgepc, srfvec)


@spice_call
def subslr(
    et: EphemerisTime,
    surfaces: Sequence[str] = (),
    method: SubpointMethod = SubpointMethod.NEAR_POINT_ELLIPSOID,
    target: str = "MARS",
    fixref: str = "IAU_MARS",
    abcorr: AberrationCorrection = AberrationCorrection.LT_S,
    obsrvr: str = "MGS",
) -> SurfacePoint:
    """Sub-solar point on ``target`` as seen from ``obsrvr``."""
    spoint, trgepc, srfvec = spice.subslr(
        with_surfaces(option_word(SubpointMethod, method), surfaces),
        target,
        float(et),
        fixref,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
    )
    return _surface_point(spoint, trgepc, srfvec)


@spice_lookup("intercept of ray from {obsrvr} on {target}")
def sincpt(
    et: EphemerisTime,
    dref: str,
    dvec: DimensionlessVector,
    surfaces: Sequence[str] = (),
    method: GeometricModel = GeometricModel.ELLIPSOID,
    target: str = "EARTH",
    fixref: str = "IAU_EARTH",
    obsrvr: str = "EARTH",
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
):
    """Surface intercept of the ray ``dvec`` (in frame ``dref``) from the observer."""
    spoint, trgepc, srfvec, found = spice.sincpt(
        with_surfaces(option_word(GeometricModel, method), surfaces),
        target,
        float(et),
        fixref,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        dref,
        to_raw(dvec),
    )
    if not found:
        return None, found
    return _surface_point(spoint, trgepc, srfvec), found


def _angles(trgepc, srfvec, phase, incdnc, emissn) -> IlluminationAngles:
    return IlluminationAngles(
        EphemerisTime(trgepc),
        from_raw(DistanceVector, srfvec),
        Angle(phase),
        Angle(incdnc),
        Angle(emissn),
    )


@spice_call
def ilumin(
    spoint: DistanceVector,
    et: EphemerisTime,
    method: str = "ELLIPSOID",
    target: str = "EARTH",
    fixref: str = "IAU_EARTH",
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
    obsrvr: str = "EARTH",
) -> IlluminationAngles:
    trgepc, srfvec, phase, incdnc, emissn = spice.ilumin(
        method,
        target,
        float(et),
        fixref,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        to_raw(spoint),
    )
    return _angles(trgepc, srfvec, phase, incdnc, emissn)


@spice_call
def illumg(
    spoint: DistanceVector,
    et: EphemerisTime,
    method: str = "ELLIPSOID",
    target: str = "EARTH",
    illmn: str = "SUN",
    fixref: str = "IAU_EARTH",
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
    obsrvr: str = "EARTH",
) -> IlluminationAngles:
    """Illumination angles with an arbitrary illumination source ``illmn``."""
    return _angles(
        *spice.illumg(
            method,
            target,
            illmn,
            float(et),
            fixref,
            option_word(AberrationCorrection, abcorr),
            obsrvr,
            to_raw(spoint),
        )
    )


@spice_call
def illumf(
    spoint: DistanceVector,
    et: EphemerisTime,
    method: str = "ELLIPSOID",
    target: str = "EARTH",
    ilusrc: str = "SUN",
    fixref: str = "IAU_EARTH",
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
    obsrvr: str = "EARTH",
) -> IlluminationConditions:
    """Illumination angles plus whether the point is visible and lit."""
    trgepc, srfvec, phase, incdnc, emissn, visibl, lit = spice.illumf(
        method,
        target,
        ilusrc,
        float(et),
        fixref,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        to_raw(spoint),
    )
    return IlluminationConditions(
        _angles(trgepc, srfvec, phase, incdnc, emissn), bool(visibl), bool(lit)
    )


@spice_call
def phaseq(
    et: EphemerisTime,
    target: str = "MOON",
    illmn: str = "SUN",
    obsrvr: str = "EARTH",
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
) -> Angle:
    """Phase angle at ``target`` between ``illmn`` and ``obsrvr``."""
    return Angle(
        spice.phaseq(float(et), target, illmn, obsrvr, option_word(AberrationCorrection, abcorr))
    )


@spice_call
def occult(
    et: EphemerisTime,
    target1: str = "MOON",
    shape1: GeometricModel = GeometricModel.ELLIPSOID,
    frame1: str = "IAU_MOON",
    target2: str = "SUN",
    shape2: GeometricModel = GeometricModel.ELLIPSOID,
    frame2: str = "IAU_SUN",
    abcorr: AberrationCorrection = AberrationCorrection.CN,
    obsrvr: str = "EARTH",
) -> OccultationType:
    code = spice.occult(
        target1,
        option_word(GeometricModel, shape1),
        frame1,
        target2,
        option_word(GeometricModel, shape2),
        frame2,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        float(et),
    )
    return OccultationType(int(code))


@spice_call
def lspcn(
    et: EphemerisTime,
    body: str = "EARTH",
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
) -> Angle:
    """Planetocentric longitude of the Sun as seen from ``body`` (L_s)."""
    return Angle(spice.lspcn(body, float(et), option_word(AberrationCorrection, abcorr)))


@spice_call
def nearpt(
    positn: DistanceVector, a: Distance, b: Distance, c: Distance
) -> tuple[DistanceVector, Distance]:
    """Nearest point on a triaxial ellipsoid and the altitude above it."""
    npoint, alt = spice.nearpt(to_raw(positn), float(a), float(b), float(c))
    return from_raw(DistanceVector, npoint), Distance(alt)


@spice_lookup("ellipsoid intercept")
def surfpt(
    positn: DistanceVector, u: DimensionlessVector, a: Distance, b: Distance, c: Distance
):
    point, found = spice.surfpt(to_raw(positn), to_raw(u), float(a), float(b), float(c))
    if not found:
        return None, found
    return from_raw(DistanceVector, point), found


@spice_call
def npedln(
    a: Distance, b: Distance, c: Distance, linept: DistanceVector, linedr: DimensionlessVector
) -> tuple[DistanceVector, Distance]:
    """Nearest point on an ellipsoid to a line, and the distance between them."""
    pnear, dist = spice.npedln(float(a), float(b), float(c), to_raw(linept), to_raw(linedr))
    return from_raw(DistanceVector, pnear), Distance(dist)


@spice_call
def nvc2pl(normal: DimensionlessVector, constant: Distance) -> Plane:
    """Plane from normal and constant, normalised by the toolkit."""
    return _plane(spice.nvc2pl(to_raw(normal), float(constant)))


@spice_call
def pl2nvc(plane: Plane) -> tuple[DimensionlessVector, Distance]:
    normalised = _plane(_plane_struct(plane))
    return normalised.normal, normalised.constant


@spice_call
def cgv2el(center: DistanceVector, vec1: DistanceVector, vec2: DistanceVector) -> Ellipse:
    """Ellipse (with semi-axes) from a center and two generating vectors."""
    return _ellipse(spice.cgv2el(to_raw(center), to_raw(vec1), to_raw(vec2)))


@spice_call
def inelpl(ellipse: Ellipse, plane: Plane) -> tuple[int, list[DistanceVector]]:
    """
    Intersection of an ellipse and a plane. Returns the toolkit's point count
    (-1 when the ellipse lies in the plane) and the intersection points.
    """
    nxpts, xpt1, xpt2 = spice.inelpl(_ellipse_struct(ellipse), _plane_struct(plane))
    points = [from_raw(DistanceVector, p) for p in (xpt1, xpt2)[: max(nxpts, 0)]]
    return int(nxpts), points


@spice_call
def vprjp(vin: DistanceVector, plane: Plane) -> DistanceVector:
    """Orthogonal projection of a vector onto a plane."""
    return from_raw(DistanceVector, spice.vprjp(to_raw(vin), _plane_struct(plane)))
