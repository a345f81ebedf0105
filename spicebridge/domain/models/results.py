"""
Outcomes of bridged toolkit calls.

A call returns exactly one of three values:

    Success(value)          the call completed; value holds the typed outputs
    NotFound()              a lookup completed and legitimately found nothing
    Failure(code, message)  the toolkit signalled an error; no outputs

Plain calls return ``CallResult`` (Success | Failure); lookup-style calls
return ``LookupResult`` (Success | NotFound | Failure). Callers branch with
``match`` or the ``ok``/``found`` properties:

    match spkpos(et, target="MOON"):
        case Success(value=(position, light_time)):
            ...
        case Failure(code=code, message=message):
            ...
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from spicebridge.domain.exceptions import NotFoundError, SpiceCallError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    @property
    def found(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        return {"status": "success", "value": self.value}


@dataclass(frozen=True, slots=True)
class NotFound:
    what: str = ""

    @property
    def ok(self) -> bool:
        return True

    @property
    def found(self) -> bool:
        return False

    def unwrap(self):
        raise NotFoundError(self.what or "item not found")

    def to_dict(self) -> dict[str, Any]:
        return {"status": "not_found", "what": self.what}


@dataclass(frozen=True, slots=True)
class Failure:
    """
    A failed call. ``code`` is the toolkit's short error token, e.g.
    ``SPICE(KERNELVARNOTFOUND)``, kept as an opaque string.
    """

    code: str
    message: str
    explain: str = ""
    traceback: str = ""

    @property
    def ok(self) -> bool:
        return False

    @property
    def found(self) -> bool:
        return False

    def unwrap(self):
        raise SpiceCallError(self.code, self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "failure",
            "code": self.code,
            "message": self.message,
            "explain": self.explain,
        }


CallResult = Union[Success[T], Failure]
LookupResult = Union[Success[T], NotFound, Failure]
