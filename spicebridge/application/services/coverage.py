"""Coverage windows and object lists of binary kernel files."""

from collections.abc import Iterable
from os import PathLike

import spiceypy as spice

from spicebridge.domain.constants import WINDOW_CAPACITY
from spicebridge.domain.models.enums import CoverageLevel, TimeSystem
from spicebridge.domain.models.geometry import EphemerisTimeWindowSegment, WindowSegment
from spicebridge.domain.validators import option_word
from spicebridge.infrastructure.spice.decorators import spice_call
from spicebridge.infrastructure.spice.marshaling import (
    cell_to_ints,
    cell_to_windows,
    et_segment,
    new_int_cell,
    raw_segment,
    window_to_cell,
)

Segments = Iterable[WindowSegment | EphemerisTimeWindowSegment]


@spice_call
def spkcov(
    spk: str | PathLike,
    idcode: int,
    merge_to: Segments = (),
    capacity: int = WINDOW_CAPACITY,
) -> list[EphemerisTimeWindowSegment]:
    """
    Coverage of ``idcode`` in an SPK file, merged into ``merge_to``.
    ``capacity`` bounds the number of window endpoints.
    """
    cover = window_to_cell(merge_to, capacity)
    spice.spkcov(str(spk), idcode, cover)
    return cell_to_windows(cover, et_segment)


@spice_call
def ckcov(
    ck: str | PathLike,
    idcode: int,
    need_av: bool = False,
    tol: float = 0.0,
    merge_to: Segments = (),
    level: CoverageLevel = CoverageLevel.INTERVAL,
    timsys: TimeSystem = TimeSystem.SCLK,
    capacity: int = WINDOW_CAPACITY,
) -> list[WindowSegment]:
    """Coverage of a CK instrument, in encoded SCLK or TDB per ``timsys``."""
    cover = window_to_cell(merge_to, capacity)
    spice.ckcov(
        str(ck),
        idcode,
        need_av,
        option_word(CoverageLevel, level),
        tol,
        option_word(TimeSystem, timsys),
        cover,
    )
    return cell_to_windows(cover, raw_segment)


@spice_call
def pckcov(
    pck: str | PathLike,
    idcode: int,
    merge_to: Segments = (),
    capacity: int = WINDOW_CAPACITY,
) -> list[EphemerisTimeWindowSegment]:
    """Coverage of a binary PCK reference frame class ID."""
    cover = window_to_cell(merge_to, capacity)
    spice.pckcov(str(pck), idcode, cover)
    return cell_to_windows(cover, et_segment)


@spice_call
def spkobj(spk: str | PathLike, capacity: int = WINDOW_CAPACITY) -> list[int]:
    """IDs of every object with data in an SPK file."""
    ids = new_int_cell(capacity)
    spice.spkobj(str(spk), ids)
    return cell_to_ints(ids)


@spice_call
def ckobj(ck: str | PathLike, capacity: int = WINDOW_CAPACITY) -> list[int]:
    ids = new_int_cell(capacity)
    spice.ckobj(str(ck), ids)
    return cell_to_ints(ids)


@spice_call
def pckfrm(pck: str | PathLike, capacity: int = WINDOW_CAPACITY) -> list[int]:
    """Frame class IDs with data in a binary PCK file."""
    ids = new_int_cell(capacity)
    spice.pckfrm(str(pck), ids)
    return cell_to_ints(ids)


@spice_call
def dskobj(dsk: str | PathLike) -> list[int]:
    return cell_to_ints(spice.dskobj(str(dsk)))
