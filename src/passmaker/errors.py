class PassmakerError(Exception):
    "Base class for every failure raised while deriving a password."


class ValidationError(PassmakerError, ValueError):
    """Raised when a profile or request violates a constraint.

    Always raised before any hashing happens. `constraint` names the violated
    rule so callers can report it without parsing the message.
    """

    def __init__(self, constraint: str, message: str):
        super().__init__(message)
        self.constraint = constraint


class HashCapabilityError(PassmakerError):
    "Raised when the injected digest/HMAC implementation fails. Never retried."


class EncodingError(PassmakerError):
    "Raised when base conversion cannot produce the requested symbols."
