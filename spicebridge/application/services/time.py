"""Time conversion wrappers: strings, ephemeris time and time scales."""

from datetime import datetime, timezone

import spiceypy as spice

from spicebridge.domain.models.enums import EpochType, LongitudeType, TimeScale, UTCTimeFormat
from spicebridge.domain.models.records import LocalSolarTime
from spicebridge.domain.models.units import Angle, EphemerisPeriod, EphemerisTime
from spicebridge.domain.validators import option_word
from spicebridge.infrastructure.spice.bridge import bridge
from spicebridge.infrastructure.spice.decorators import spice_call

STRING_LEN = 256
DEFAULT_PICTURE = "MON DD, YYYY HR:MN:SC.#### (TDB)"


@spice_call
def str2et(time: str) -> EphemerisTime:
    """Convert a time string to ephemeris seconds past J2000 TDB."""
    return EphemerisTime(spice.str2et(time))


@spice_call
def utc2et(utcstr: str) -> EphemerisTime:
    return EphemerisTime(spice.utc2et(utcstr))


@spice_call
def et2utc(
    et: EphemerisTime,
    format: UTCTimeFormat = UTCTimeFormat.CALENDAR,
    prec: int = 4,
) -> str:
    return spice.et2utc(float(et), option_word(UTCTimeFormat, format), prec)


@spice_call
def timout(et: EphemerisTime, pictur: str = DEFAULT_PICTURE) -> str:
    return spice.timout(float(et), pictur, STRING_LEN)


@spice_call
def etcal(et: EphemerisTime) -> str:
    return spice.etcal(float(et))


@spice_call
def tparse(string: str) -> EphemerisTime:
    """
    Parse a UTC string without leap seconds. Parse errors are reported by
    the toolkit as a message rather than an error, and become a Failure.
    """
    sp2000, errmsg = spice.tparse(string, STRING_LEN)
    if errmsg:
        bridge.signal("SPICE(INVALIDTIMESTRING)", errmsg)
    return EphemerisTime(sp2000)


@spice_call
def deltet(epoch: float, eptype: EpochType = EpochType.UTC) -> EphemerisPeriod:
    """ET - UTC at the given epoch."""
    return EphemerisPeriod(spice.deltet(epoch, option_word(EpochType, eptype)))


@spice_call
def unitim(epoch: float, insys: TimeScale, outsys: TimeScale) -> float:
    return spice.unitim(
        epoch, option_word(TimeScale, insys), option_word(TimeScale, outsys)
    )


@spice_call
def et2lst(
    et: EphemerisTime,
    body: int,
    lon: Angle,
    lon_type: LongitudeType = LongitudeType.PLANETOCENTRIC,
) -> LocalSolarTime:
    hr, mn, sc, time, ampm = spice.et2lst(
        float(et),
        body,
        float(lon),
        option_word(LongitudeType, lon_type),
        STRING_LEN,
        STRING_LEN,
    )
    return LocalSolarTime(int(hr), int(mn), int(sc), time, ampm)


@spice_call
def et_now() -> EphemerisTime:
    """Ephemeris time of the system clock's current UTC instant."""
    now = datetime.now(timezone.utc)
    return EphemerisTime(spice.str2et(now.strftime("%Y-%m-%dT%H:%M:%S.%f")))
