"""Opening, writing and closing binary kernel files by handle."""

from collections.abc import Sequence
from os import PathLike

import spiceypy as spice

from spicebridge.domain.models.enums import Ck05Subtype
from spicebridge.domain.models.records import (
    CkPointingRecord,
    CkType2Record,
    SpkType5Observation,
)
from spicebridge.domain.models.units import EphemerisTime, MassConstant
from spicebridge.domain.exceptions import ValidationError
from spicebridge.domain.validators import validate_capacity
from spicebridge.infrastructure.spice.decorators import spice_call
from spicebridge.infrastructure.spice.marshaling import to_raw_list
from spicebridge.logging_config import get_logger

logger = get_logger(__name__)


@spice_call
def dafopr(fname: str | PathLike) -> int:
    """Open a DAF for reading; returns its handle."""
    return int(spice.dafopr(str(fname)))


@spice_call
def dafcls(handle: int) -> None:
    spice.dafcls(handle)


@spice_call
def spkopn(name: str | PathLike, ifname: str = "", ncomch: int = 0) -> int:
    """Create a new SPK file; fails if the file already exists."""
    handle = int(spice.spkopn(str(name), ifname, ncomch))
    logger.info(f"Opened new SPK {name} (handle {handle})")
    return handle


@spice_call
def spkopa(file: str | PathLike) -> int:
    """Open an existing SPK for appending."""
    return int(spice.spkopa(str(file)))


@spice_call
def spkcls(handle: int) -> None:
    spice.spkcls(handle)


@spice_call
def spkw05(
    handle: int,
    body: int,
    center: int,
    frame: str,
    first: EphemerisTime,
    last: EphemerisTime,
    segid: str,
    gm: MassConstant,
    states: Sequence[SpkType5Observation],
) -> None:
    """
    Write a type 5 (two-body) segment from time-ordered observations.
    The toolkit requires ``first`` <= ``last`` and strictly increasing epochs.
    """
    validate_capacity(len(states), "number of states")
    epochs = [float(obs.et) for obs in states]
    spice.spkw05(
        handle,
        body,
        center,
        frame,
        float(first),
        float(last),
        segid,
        float(gm),
        len(states),
        to_raw_list(obs.state for obs in states),
        epochs,
    )


@spice_call
def ckopn(name: str | PathLike, ifname: str = "", ncomch: int = 0) -> int:
    return int(spice.ckopn(str(name), ifname, ncomch))


@spice_call
def ckcls(handle: int) -> None:
    spice.ckcls(handle)


def _pointing_arrays(records: Sequence[CkPointingRecord]):
    validate_capacity(len(records), "number of pointing records")
    sclkdp = [float(rec.sclkdp) for rec in records]
    return sclkdp, to_raw_list(rec.quat for rec in records), to_raw_list(rec.av for rec in records)


@spice_call
def ckw01(
    handle: int,
    begtim: float,
    endtim: float,
    inst: int,
    ref: str,
    segid: str,
    records: Sequence[CkPointingRecord],
    avflag: bool = True,
) -> None:
    """Write a type 1 (discrete pointing) segment. Times are encoded SCLK."""
    sclkdp, quats, avvs = _pointing_arrays(records)
    spice.ckw01(handle, begtim, endtim, inst, ref, avflag, segid, len(records), sclkdp, quats, avvs)


@spice_call
def ckw02(
    handle: int,
    begtim: float,
    endtim: float,
    inst: int,
    ref: str,
    segid: str,
    records: Sequence[CkType2Record],
) -> None:
    """Write a type 2 (constant angular velocity) segment."""
    validate_capacity(len(records), "number of pointing intervals")
    spice.ckw02(
        handle,
        begtim,
        endtim,
        inst,
        ref,
        segid,
        len(records),
        [float(rec.start) for rec in records],
        [float(rec.stop) for rec in records],
        to_raw_list(rec.quat for rec in records),
        to_raw_list(rec.av for rec in records),
        [float(rec.rate) for rec in records],
    )


@spice_call
def ckw03(
    handle: int,
    begtim: float,
    endtim: float,
    inst: int,
    ref: str,
    segid: str,
    records: Sequence[CkPointingRecord],
    starts: Sequence[float] = (),
    avflag: bool = True,
) -> None:
    """
    Write a type 3 (linearly interpolated) segment. ``starts`` are the
    interpolation interval start times; by default a single interval
    starting at the first record.
    """
    sclkdp, quats, avvs = _pointing_arrays(records)
    starts = [float(s) for s in starts] or [sclkdp[0]]
    spice.ckw03(
        handle,
        begtim,
        endtim,
        inst,
        ref,
        avflag,
        segid,
        len(records),
        sclkdp,
        quats,
        avvs,
        len(starts),
        starts,
    )


@spice_call
def ckw05(
    handle: int,
    subtype: Ck05Subtype,
    degree: int,
    begtim: float,
    endtim: float,
    inst: int,
    ref: str,
    segid: str,
    sclkdp: Sequence[float],
    packts: Sequence[Sequence[float]],
    rate: float,
    starts: Sequence[float] = (),
    avflag: bool = True,
) -> None:
    """
    Write a type 5 (interpolated packet) segment. Each packet holds
    ``subtype.packet_size`` values; ``rate`` is seconds per tick.
    """
    subtype = Ck05Subtype(subtype)
    validate_capacity(len(sclkdp), "number of packets")
    if len(packts) != len(sclkdp):
        raise ValidationError(f"{len(sclkdp)} epochs but {len(packts)} packets")
    for packet in packts:
        if len(packet) != subtype.packet_size:
            raise ValidationError(
                f"subtype {subtype.value} packets hold {subtype.packet_size} values, got {len(packet)}"
            )
    sclkdp = [float(t) for t in sclkdp]
    starts = [float(s) for s in starts] or [sclkdp[0]]
    spice.ckw05(
        handle,
        subtype.value,
        degree,
        begtim,
        endtim,
        inst,
        ref,
        avflag,
        segid,
        sclkdp,
        [[float(v) for v in packet] for packet in packts],
        rate,
        len(starts),
        starts,
    )


@spice_call
def cklpf(filename: str | PathLike) -> int:
    """Load a CK for reading without going through furnsh."""
    return int(spice.cklpf(str(filename)))


@spice_call
def ckupf(handle: int) -> None:
    spice.ckupf(handle)


@spice_call
def spklef(filename: str | PathLike) -> int:
    """Load an SPK for reading without going through furnsh."""
    return int(spice.spklef(str(filename)))


@spice_call
def spkuef(handle: int) -> None:
    spice.spkuef(handle)
