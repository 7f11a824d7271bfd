class NNumberError(RuntimeError):
    """Base class for all conversion errors."""


class InvalidNNumber(NNumberError):
    """Raised when a tail number is not a valid US N-Number."""


class InvalidIcaoAddress(NNumberError):
    """Raised when an address is not a valid US ICAO address."""


class InvalidSuffix(InvalidNNumber):
    """Raised when the alphabetical suffix of a tail number is invalid."""


class AddressOverflow(InvalidNNumber):
    """Raised when a value does not fit in a 6 character ICAO address."""


class InvalidFormat(InvalidIcaoAddress):
    """Raised when an address is not 6 hex characters starting with A."""
