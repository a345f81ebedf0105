"""Instrument field-of-view definitions and visibility tests."""

import spiceypy as spice

from spicebridge.domain.models.enums import (
    AberrationCorrection,
    FovAberrationCorrection,
    GeometricModel,
)
from spicebridge.domain.models.records import FieldOfView
from spicebridge.domain.models.units import EphemerisTime
from spicebridge.domain.models.vectors import DimensionlessVector
from spicebridge.domain.validators import option_word, validate_capacity
from spicebridge.infrastructure.spice.decorators import spice_call
from spicebridge.infrastructure.spice.marshaling import from_raw, from_raw_list, to_raw

MAX_FOV_BOUNDS = 100


@spice_call
def getfov(instid: int, room: int = MAX_FOV_BOUNDS) -> FieldOfView:
    """
    FOV of instrument ``instid`` from its INS<ID>_FOV_* kernel variables.
    ``room`` bounds the number of boundary vectors read back.
    """
    validate_capacity(room, "room")
    shape, frame, bsight, n, bounds = spice.getfov(instid, room)
    return FieldOfView(
        shape.strip(),
        frame.strip(),
        from_raw(DimensionlessVector, bsight),
        tuple(from_raw_list(DimensionlessVector, bounds[:n])),
    )


@spice_call
def fovray(
    et: EphemerisTime,
    raydir: DimensionlessVector,
    inst: str = "CASSINI_UVIS_FUV_OCC",
    rframe: str = "J2000",
    abcorr: FovAberrationCorrection = FovAberrationCorrection.S,
    observer: str = "CASSINI",
) -> bool:
    """Whether the ray ``raydir`` (in ``rframe``) lies in the instrument FOV."""
    return bool(
        spice.fovray(
            inst,
            to_raw(raydir),
            rframe,
            option_word(FovAberrationCorrection, abcorr),
            observer,
            float(et),
        )
    )


@spice_call
def fovtrg(
    et: EphemerisTime,
    inst: str = "CASSINI_ISS_NAC",
    target: str = "ENCELADUS",
    tshape: GeometricModel = GeometricModel.ELLIPSOID,
    tframe: str = "IAU_ENCELADUS",
    abcorr: AberrationCorrection = AberrationCorrection.CN_S,
    obsrvr: str = "CASSINI",
) -> bool:
    """Whether ``target`` is at least partly in the instrument FOV."""
    return bool(
        spice.fovtrg(
            inst,
            target,
            option_word(GeometricModel, tshape),
            tframe,
            option_word(AberrationCorrection, abcorr),
            obsrvr,
            float(et),
        )
    )
