"""Position, state and pointing lookups from loaded SPK and CK kernels."""

import spiceypy as spice

from spicebridge.domain.models.enums import AberrationCorrection, ReferenceLocation
from spicebridge.domain.models.matrices import RotationMatrix
from spicebridge.domain.models.records import Pointing
from spicebridge.domain.models.units import EphemerisPeriod, EphemerisTime
from spicebridge.domain.models.vectors import AngularVelocity, DistanceVector, StateVector
from spicebridge.domain.validators import option_word
from spicebridge.infrastructure.spice.decorators import spice_call, spice_lookup
from spicebridge.infrastructure.spice.marshaling import from_raw, to_raw


@spice_call
def spkpos(
    et: EphemerisTime,
    targ: str = "EARTH",
    obs: str = "SSB",
    ref: str = "ECLIPJ2000",
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
) -> tuple[DistanceVector, EphemerisPeriod]:
    """Position of ``targ`` relative to ``obs`` and the one-way light time."""
    ptarg, lt = spice.spkpos(targ, float(et), ref, option_word(AberrationCorrection, abcorr), obs)
    return from_raw(DistanceVector, ptarg), EphemerisPeriod(lt)


@spice_call
def spkezr(
    et: EphemerisTime,
    targ: str = "MOON",
    obs: str = "EARTH BARYCENTER",
    ref: str = "ECLIPJ2000",
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
) -> tuple[StateVector, EphemerisPeriod]:
    state, lt = spice.spkezr(targ, float(et), ref, option_word(AberrationCorrection, abcorr), obs)
    return from_raw(StateVector, state), EphemerisPeriod(lt)


@spice_call
def spkgeo(
    targ: int, et: EphemerisTime, ref: str, obs: int
) -> tuple[StateVector, EphemerisPeriod]:
    """Geometric state by integer IDs, no aberration correction."""
    state, lt = spice.spkgeo(targ, float(et), ref, obs)
    return from_raw(StateVector, state), EphemerisPeriod(lt)


@spice_call
def spkgps(
    targ: int, et: EphemerisTime, ref: str, obs: int
) -> tuple[DistanceVector, EphemerisPeriod]:
    pos, lt = spice.spkgps(targ, float(et), ref, obs)
    return from_raw(DistanceVector, pos), EphemerisPeriod(lt)


@spice_call
def spkezp(
    targ: int,
    et: EphemerisTime,
    ref: str = "J2000",
    abcorr: AberrationCorrection = AberrationCorrection.NONE,
    obs: int = 399,
) -> tuple[DistanceVector, EphemerisPeriod]:
    """Position by integer IDs, with aberration correction."""
    ptarg, lt = spice.spkezp(targ, float(et), ref, option_word(AberrationCorrection, abcorr), obs)
    return from_raw(DistanceVector, ptarg), EphemerisPeriod(lt)


@spice_call
def spkcpo(
    et: EphemerisTime,
    obspos: DistanceVector,
    target: str = "SUN",
    outref: str = "ITRF93",
    refloc: ReferenceLocation = ReferenceLocation.OBSERVER,
    abcorr: AberrationCorrection = AberrationCorrection.CN_S,
    obsctr: str = "EARTH",
    obsref: str = "ITRF93",
) -> tuple[StateVector, EphemerisPeriod]:
    """State of ``target`` seen from a fixed point ``obspos`` in ``obsref``."""
    state, lt = spice.spkcpo(
        target,
        float(et),
        outref,
        option_word(ReferenceLocation, refloc),
        option_word(AberrationCorrection, abcorr),
        to_raw(obspos),
        obsctr,
        obsref,
    )
    return from_raw(StateVector, state), EphemerisPeriod(lt)


@spice_call
def spkcpt(
    et: EphemerisTime,
    trgpos: DistanceVector,
    trgctr: str = "EARTH",
    trgref: str = "ITRF93",
    outref: str = "ITRF93",
    refloc: ReferenceLocation = ReferenceLocation.TARGET,
    abcorr: AberrationCorrection = AberrationCorrection.CN_S,
    obsrvr: str = "MGS",
) -> tuple[StateVector, EphemerisPeriod]:
    """State of a fixed point ``trgpos`` in ``trgref`` seen from ``obsrvr``."""
    state, lt = spice.spkcpt(
        to_raw(trgpos),
        trgctr,
        trgref,
        float(et),
        outref,
        option_word(ReferenceLocation, refloc),
        option_word(AberrationCorrection, abcorr),
        obsrvr,
    )
    return from_raw(StateVector, state), EphemerisPeriod(lt)


@spice_call
def spkcvo(
    et: EphemerisTime,
    obssta: StateVector,
    obsepc: EphemerisTime,
    target: str = "SUN",
    outref: str = "ITRF93",
    refloc: ReferenceLocation = ReferenceLocation.OBSERVER,
    abcorr: AberrationCorrection = AberrationCorrection.CN_S,
    obsctr: str = "EARTH",
    obsref: str = "ITRF93",
) -> tuple[StateVector, EphemerisPeriod]:
    """State of ``target`` seen from an observer moving at constant velocity."""
    state, lt = spice.spkcvo(
        target,
        float(et),
        outref,
        option_word(ReferenceLocation, refloc),
        option_word(AberrationCorrection, abcorr),
        to_raw(obssta),
        float(obsepc),
        obsctr,
        obsref,
    )
    return from_raw(StateVector, state), EphemerisPeriod(lt)


@spice_call
def spkcvt(
    et: EphemerisTime,
    trgsta: StateVector,
    trgepc: EphemerisTime,
    trgctr: str = "EARTH",
    trgref: str = "ITRF93",
    outref: str = "ITRF93",
    refloc: ReferenceLocation = ReferenceLocation.TARGET,
    abcorr: AberrationCorrection = AberrationCorrection.CN_S,
    obsrvr: str = "MGS",
) -> tuple[StateVector, EphemerisPeriod]:
    state, lt = spice.spkcvt(
        to_raw(trgsta),
        float(trgepc),
        trgctr,
        trgref,
        float(et),
        outref,
        option_word(ReferenceLocation, refloc),
        option_word(AberrationCorrection, abcorr),
        obsrvr,
    )
    return from_raw(StateVector, state), EphemerisPeriod(lt)


@spice_lookup("pointing for instrument {inst} at {sclkdp}")
def ckgp(inst: int, sclkdp: float, tol: float, ref: str = "J2000"):
    """C-matrix nearest to an encoded spacecraft clock time, within ``tol`` ticks."""
    cmat, clkout, found = spice.ckgp(inst, sclkdp, tol, ref)
    if not found:
        return None, found
    return Pointing(from_raw(RotationMatrix, cmat), float(clkout)), found


@spice_lookup("pointing for instrument {inst} at {sclkdp}")
def ckgpav(inst: int, sclkdp: float, tol: float, ref: str = "J2000"):
    cmat, av, clkout, found = spice.ckgpav(inst, sclkdp, tol, ref)
    if not found:
        return None, found
    return (
        Pointing(
            from_raw(RotationMatrix, cmat),
            float(clkout),
            from_raw(AngularVelocity, av),
        ),
        found,
    )
