"""Body and frame name/ID translation."""

import spiceypy as spice

from spicebridge.infrastructure.spice.decorators import spice_call, spice_lookup

NAME_LEN = 256


@spice_lookup("body name {name}")
def bodn2c(name: str):
    """Body name to NAIF integer ID."""
    code, found = spice.bodn2c(name)
    return int(code), found


@spice_lookup("body code {code}")
def bodc2n(code: int):
    name, found = spice.bodc2n(code, NAME_LEN)
    return name, found


@spice_lookup("body string {name}")
def bods2c(name: str):
    """Body name or numeric string to NAIF integer ID."""
    code, found = spice.bods2c(name)
    return int(code), found


@spice_call
def boddef(name: str, code: int) -> None:
    spice.boddef(name, code)


@spice_call
def bodfnd(body: int, item: str) -> bool:
    """Whether BODY<body>_<item> is in the kernel pool."""
    return bool(spice.bodfnd(body, item))


@spice_lookup("frame name {frname}")
def namfrm(frname: str):
    # Unknown frames map to code 0
    code = int(spice.namfrm(frname))
    return code, code != 0


@spice_lookup("frame code {frcode}")
def frmnam(frcode: int):
    # Unknown codes map to a blank name
    name = spice.frmnam(frcode).strip()
    return name, bool(name)
