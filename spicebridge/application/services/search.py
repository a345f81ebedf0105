"""
Geometry finder searches.

Each search takes a confinement window (``cnfine``) and returns the
sub-window over which the condition holds. ``step`` must be shorter than
the shortest interval of interest. ``nintvls`` sizes the toolkit workspace
and ``capacity`` the result window (number of endpoints).
"""

from collections.abc import Sequence

import spiceypy as spice

from spicebridge.application.services.geometry import with_surfaces
from spicebridge.domain.constants import MAX_INTERVALS, WINDOW_CAPACITY
from spicebridge.domain.models.enums import (
    AberrationCorrection,
    CoordinateName,
    CoordinateSystem,
    FovAberrationCorrection,
    GeometricModel,
    IlluminationAngleType,
    OccultationSearch,
    RelationalOperator,
    SeparationShape,
    SubpointSearchMethod,
)
from spicebridge.domain.models.geometry import EphemerisTimeWindowSegment
from spicebridge.domain.models.units import Angle, Distance, EphemerisPeriod, Speed
from spicebridge.domain.models.vectors import DimensionlessVector, DistanceVector
from spicebridge.domain.validators import option_word, validate_capacity
from spicebridge.infrastructure.spice.decorators import spice_call
from spicebridge.infrastructure.spice.marshaling import (
    cell_to_windows,
    et_segment,
    new_double_cell,
    to_raw,
    window_to_cell,
)

Window = Sequence[EphemerisTimeWindowSegment]


def _search_cells(cnfine: Window, capacity: int, nintvls: int):
    validate_capacity(nintvls, "nintvls")
    confine = window_to_cell(cnfine, max(capacity, 2 * len(cnfine)))
    return confine, new_double_cell(capacity)


@spice_call
def gfposc(
    step: EphemerisPeriod,
    cnfine: Window,
    target: str = "SUN",
    frame: str = "IAU_EARTH",
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
    obsrvr: str = "EARTH",
    crdsys: CoordinateSystem = CoordinateSystem.LATITUDINAL,
    coord: CoordinateName = CoordinateName.LATITUDE,
    relate: RelationalOperator = RelationalOperator.ABSMAX,
    refval: float = 0.0,
    adjust: float = 0.0,
    nintvls: int = MAX_INTERVALS,
    capacity: int = WINDOW_CAPACITY,
) -> list[EphemerisTimeWindowSegment]:
    """
    Times when a coordinate of the observer-target position satisfies a
    relation. ``refval`` and ``adjust`` are in the coordinate's own units
    (km or radians), so they stay plain floats.
    """
    confine, result = _search_cells(cnfine, capacity, nintvls)
    spice.gfposc(
        target,
        frame,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        option_word(CoordinateSystem, crdsys),
        option_word(CoordinateName, coord),
        option_word(RelationalOperator, relate),
        refval,
        adjust,
        float(step),
        nintvls,
        confine,
        result,
    )
    return cell_to_windows(result, et_segment)


@spice_call
def gfdist(
    cnfine: Window,
    step: EphemerisPeriod,
    refval: Distance,
    adjust: Distance = Distance(),
    target: str = "MOON",
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
    obsrvr: str = "EARTH",
    relate: RelationalOperator = RelationalOperator.GREATER_THAN,
    nintvls: int = MAX_INTERVALS,
    capacity: int = WINDOW_CAPACITY,
) -> list[EphemerisTimeWindowSegment]:
    """Times when the observer-target distance satisfies a relation."""
    confine, result = _search_cells(cnfine, capacity, nintvls)
    spice.gfdist(
        target,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        option_word(RelationalOperator, relate),
        float(refval),
        float(adjust),
        float(step),
        nintvls,
        confine,
        result,
    )
    return cell_to_windows(result, et_segment)


@spice_call
def gfsep(
    cnfine: Window,
    refval: Angle,
    step: EphemerisPeriod,
    adjust: Angle = Angle(),
    targ1: str = "SUN",
    shape1: SeparationShape = SeparationShape.POINT,
    frame1: str = "NULL",
    targ2: str = "MOON",
    shape2: SeparationShape = SeparationShape.POINT,
    frame2: str = "NULL",
    abcorr: AberrationCorrection = AberrationCorrection.LT,
    obsrvr: str = "EARTH",
    relate: RelationalOperator = RelationalOperator.LESS_THAN,
    nintvls: int = MAX_INTERVALS,
    capacity: int = WINDOW_CAPACITY,
) -> list[EphemerisTimeWindowSegment]:
    """Times when the angular separation of two targets satisfies a relation."""
    confine, result = _search_cells(cnfine, capacity, nintvls)
    spice.gfsep(
        targ1,
        option_word(SeparationShape, shape1),
        frame1,
        targ2,
        option_word(SeparationShape, shape2),
        frame2,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        option_word(RelationalOperator, relate),
        float(refval),
        float(adjust),
        float(step),
        nintvls,
        confine,
        result,
    )
    return cell_to_windows(result, et_segment)


@spice_call
def gfoclt(
    cnfine: Window,
    step: EphemerisPeriod,
    front_surfaces: Sequence[str] = (),
    back_surfaces: Sequence[str] = (),
    occtyp: OccultationSearch = OccultationSearch.ANY,
    front: str = "MOON",
    front_shape: GeometricModel = GeometricModel.ELLIPSOID,
    front_frame: str = "IAU_MOON",
    back: str = "SUN",
    back_shape: GeometricModel = GeometricModel.ELLIPSOID,
    back_frame: str = "IAU_SUN",
    abcorr: AberrationCorrection = AberrationCorrection.CN,
    obsrvr: str = "EARTH",
    capacity: int = WINDOW_CAPACITY,
) -> list[EphemerisTimeWindowSegment]:
    """Times when ``front`` occults ``back`` as seen by ``obsrvr``."""
    confine = window_to_cell(cnfine, max(capacity, 2 * len(cnfine)))
    result = new_double_cell(capacity)
    spice.gfoclt(
        option_word(OccultationSearch, occtyp),
        front,
        with_surfaces(option_word(GeometricModel, front_shape), front_surfaces),
        front_frame,
        back,
        with_surfaces(option_word(GeometricModel, back_shape), back_surfaces),
        back_frame,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        float(step),
        confine,
        result,
    )
    return cell_to_windows(result, et_segment)


@spice_call
def gfilum(
    cnfine: Window,
    spoint: DistanceVector,
    refval: Angle,
    step: EphemerisPeriod,
    adjust: Angle = Angle(),
    angtyp: IlluminationAngleType = IlluminationAngleType.INCIDENCE,
    target: str = "MARS",
    illmn: str = "SUN",
    fixref: str = "IAU_MARS",
    abcorr: AberrationCorrection = AberrationCorrection.CN_S,
    obsrvr: str = "MRO",
    relate: RelationalOperator = RelationalOperator.LESS_THAN,
    nintvls: int = MAX_INTERVALS,
    capacity: int = WINDOW_CAPACITY,
) -> list[EphemerisTimeWindowSegment]:
    """
    Times when an illumination angle at the surface point ``spoint``
    (body-fixed, in ``fixref``) satisfies a relation.
    """
    confine, result = _search_cells(cnfine, capacity, nintvls)
    spice.gfilum(
        "ELLIPSOID",
        option_word(IlluminationAngleType, angtyp),
        target,
        illmn,
        fixref,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        to_raw(spoint),
        option_word(RelationalOperator, relate),
        float(refval),
        float(adjust),
        float(step),
        nintvls,
        confine,
        result,
    )
    return cell_to_windows(result, et_segment)


@spice_call
def gfpa(
    cnfine: Window,
    refval: Angle,
    step: EphemerisPeriod,
    adjust: Angle = Angle(),
    target: str = "MOON",
    illmn: str = "SUN",
    abcorr: AberrationCorrection = AberrationCorrection.LT_S,
    obsrvr: str = "EARTH",
    relate: RelationalOperator = RelationalOperator.EQUAL,
    nintvls: int = MAX_INTERVALS,
    capacity: int = WINDOW_CAPACITY,
) -> list[EphemerisTimeWindowSegment]:
    """Times when the phase angle of ``target`` satisfies a relation."""
    confine, result = _search_cells(cnfine, capacity, nintvls)
    spice.gfpa(
        target,
        illmn,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        option_word(RelationalOperator, relate),
        float(refval),
        float(adjust),
        float(step),
        nintvls,
        confine,
        result,
    )
    return cell_to_windows(result, et_segment)


@spice_call
def gfrr(
    cnfine: Window,
    step: EphemerisPeriod,
    refval: Speed,
    adjust: Speed = Speed(),
    target: str = "MOON",
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
    obsrvr: str = "EARTH",
    relate: RelationalOperator = RelationalOperator.GREATER_THAN,
    nintvls: int = MAX_INTERVALS,
    capacity: int = WINDOW_CAPACITY,
) -> list[EphemerisTimeWindowSegment]:
    """Times when the observer-target range rate satisfies a relation."""
    confine, result = _search_cells(cnfine, capacity, nintvls)
    spice.gfrr(
        target,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        option_word(RelationalOperator, relate),
        float(refval),
        float(adjust),
        float(step),
        nintvls,
        confine,
        result,
    )
    return cell_to_windows(result, et_segment)


@spice_call
def gfsntc(
    cnfine: Window,
    dvec: DimensionlessVector,
    step: EphemerisPeriod,
    refval: float = 0.0,
    adjust: float = 0.0,
    target: str = "EARTH",
    fixref: str = "IAU_EARTH",
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
    obsrvr: str = "SUN",
    dref: str = "SEM",
    crdsys: CoordinateSystem = CoordinateSystem.LATITUDINAL,
    coord: CoordinateName = CoordinateName.LATITUDE,
    relate: RelationalOperator = RelationalOperator.EQUAL,
    nintvls: int = MAX_INTERVALS,
    capacity: int = WINDOW_CAPACITY,
) -> list[EphemerisTimeWindowSegment]:
    """
    Times when a coordinate of the surface intercept of the ray ``dvec``
    (in ``dref``, from ``obsrvr``) satisfies a relation.
    """
    confine, result = _search_cells(cnfine, capacity, nintvls)
    spice.gfsntc(
        target,
        fixref,
        "ELLIPSOID",
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        dref,
        to_raw(dvec),
        option_word(CoordinateSystem, crdsys),
        option_word(CoordinateName, coord),
        option_word(RelationalOperator, relate),
        refval,
        adjust,
        float(step),
        nintvls,
        confine,
        result,
    )
    return cell_to_windows(result, et_segment)


@spice_call
def gfsubc(
    step: EphemerisPeriod,
    cnfine: Window,
    refval: float = 0.0,
    adjust: float = 0.0,
    target: str = "EARTH",
    fixref: str = "IAU_EARTH",
    method: SubpointSearchMethod = SubpointSearchMethod.NEAR_POINT_ELLIPSOID,
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
    obsrvr: str = "SUN",
    crdsys: CoordinateSystem = CoordinateSystem.GEODETIC,
    coord: CoordinateName = CoordinateName.LATITUDE,
    relate: RelationalOperator = RelationalOperator.GREATER_THAN,
    nintvls: int = MAX_INTERVALS,
    capacity: int = WINDOW_CAPACITY,
) -> list[EphemerisTimeWindowSegment]:
    """Times when a coordinate of the sub-observer point satisfies a relation."""
    confine, result = _search_cells(cnfine, capacity, nintvls)
    spice.gfsubc(
        target,
        fixref,
        option_word(SubpointSearchMethod, method),
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        option_word(CoordinateSystem, crdsys),
        option_word(CoordinateName, coord),
        option_word(RelationalOperator, relate),
        refval,
        adjust,
        float(step),
        nintvls,
        confine,
        result,
    )
    return cell_to_windows(result, et_segment)


@spice_call
def gftfov(
    step: EphemerisPeriod,
    cnfine: Window,
    inst: str = "CASSINI_ISS_NAC",
    target: str = "PHOEBE",
    tshape: GeometricModel = GeometricModel.ELLIPSOID,
    tframe: str = "IAU_PHOEBE",
    abcorr: AberrationCorrection = AberrationCorrection.LT_S,
    obsrvr: str = "CASSINI",
) -> list[EphemerisTimeWindowSegment]:
    """Times when ``target`` appears in the instrument field of view."""
    confine = window_to_cell(cnfine, max(WINDOW_CAPACITY, 2 * len(cnfine)))
    result = spice.gftfov(
        inst,
        target,
        option_word(GeometricModel, tshape),
        tframe,
        option_word(AberrationCorrection, abcorr),
        obsrvr,
        float(step),
        confine,
    )
    return cell_to_windows(result, et_segment)


@spice_call
def gfrfov(
    raydir: DimensionlessVector,
    step: EphemerisPeriod,
    cnfine: Window,
    inst: str = "CASSINI_ISS_NAC",
    rframe: str = "IAU_PHOEBE",
    abcorr: FovAberrationCorrection = FovAberrationCorrection.S,
    obsrvr: str = "CASSINI",
) -> list[EphemerisTimeWindowSegment]:
    """Times when the ray ``raydir`` (in ``rframe``) lies in the field of view."""
    confine = window_to_cell(cnfine, max(WINDOW_CAPACITY, 2 * len(cnfine)))
    result = spice.gfrfov(
        inst,
        to_raw(raydir),
        rframe,
        option_word(FovAberrationCorrection, abcorr),
        obsrvr,
        float(step),
        confine,
    )
    return cell_to_windows(result, et_segment)
