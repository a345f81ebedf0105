"""Kernel loading and kernel-pool bookkeeping."""

from collections.abc import Iterable
from os import PathLike

import spiceypy as spice

from spicebridge.domain.models.enums import KernelType
from spicebridge.domain.models.records import KernelInfo
from spicebridge.domain.validators import option_word
from spicebridge.infrastructure.spice.decorators import spice_call, spice_lookup
from spicebridge.logging_config import get_logger

logger = get_logger(__name__)

NAME_LEN = 256


def _kinds(kind: KernelType | str | Iterable[KernelType | str]) -> str:
    """Space-separated kernel type words, e.g. 'SPK CK'."""
    if isinstance(kind, str):
        return " ".join(option_word(KernelType, word) for word in kind.split())
    return " ".join(option_word(KernelType, k) for k in kind)


@spice_call
def furnsh(path: str | PathLike) -> None:
    spice.furnsh(str(path))
    logger.info(f"Loaded kernel {path}")


@spice_call
def furnsh_list(paths: Iterable[str | PathLike]) -> int:
    """Load kernels in order, stopping at the first one that fails. Returns the count."""
    count = 0
    for path in paths:
        spice.furnsh(str(path))
        logger.info(f"Loaded kernel {path}")
        count += 1
    return count


@spice_call
def unload(path: str | PathLike) -> None:
    spice.unload(str(path))
    logger.info(f"Unloaded kernel {path}")


@spice_call
def ktotal(kind: KernelType | str | Iterable[KernelType | str] = KernelType.ALL) -> int:
    """Number of loaded kernels of the given type(s)."""
    return spice.ktotal(_kinds(kind))


@spice_lookup("kernel #{which} of kind {kind}")
def kdata(which: int = 0, kind: KernelType | str = KernelType.ALL):
    file, filtyp, srcfil, handle, found = spice.kdata(
        which, _kinds(kind), NAME_LEN, NAME_LEN, NAME_LEN
    )
    return KernelInfo(file, filtyp, srcfil, handle), found


@spice_lookup("loaded kernel {file}")
def kinfo(file: str | PathLike):
    filtyp, srcfil, handle, found = spice.kinfo(str(file), NAME_LEN, NAME_LEN)
    return KernelInfo(str(file), filtyp, srcfil, handle), found
