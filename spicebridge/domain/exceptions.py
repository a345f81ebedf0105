class SpiceBridgeException(Exception):
    """
    Base exception for all binding-related errors.
    """


class ValidationError(SpiceBridgeException, ValueError):
    """
    Raised when an argument cannot be handed to the toolkit as given.
    Detected locally, before any toolkit call is made.
    """

    code = "SPICEBRIDGE(INVALIDARGUMENT)"


class MarshalingError(ValidationError):
    """
    Raised when a raw array has the wrong shape for the requested type.
    """

    code = "SPICEBRIDGE(BADARRAYSHAPE)"


class SpiceCallError(SpiceBridgeException):
    """
    Raised by Failure.unwrap(): a toolkit call failed.
    Carries the toolkit's short error token and long message verbatim.
    """

    def __init__(self, code: str, message: str):
        super().__init__(f"{code}: {message}" if message else code)
        self.code = code
        self.message = message


class NotFoundError(SpiceBridgeException, LookupError):
    """
    Raised by NotFound.unwrap(): a lookup legitimately found nothing.
    Not a toolkit error.
    """


class KernelDirectoryError(SpiceBridgeException):
    """
    Raised when the configured kernel directory is missing or holds no kernels.
    """
