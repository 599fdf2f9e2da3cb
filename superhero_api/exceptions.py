"""
Application Exceptions

Error conditions raised by the game core and the stores. Controllers catch
these and translate them into JSON failure responses.
"""


class SuperheroApiError(Exception):
    """Base class for all application errors."""
    status_code = 500


class InvalidArgument(SuperheroApiError):
    """A required input is missing, empty, or outside the supported set."""
    status_code = 400


class InsufficientData(SuperheroApiError):
    """Fewer than two heroes carry a usable value for the requested attribute."""
    status_code = 422


class NoSuitablePair(InsufficientData):
    """Valid heroes exist but every candidate pair has a zero gap."""


class HeroNotFound(SuperheroApiError):
    status_code = 404


class UserNotFound(SuperheroApiError):
    status_code = 404


class UserValidationError(SuperheroApiError):
    """A user field failed validation (email shape, minimum lengths)."""
    status_code = 400


class DuplicateUserError(SuperheroApiError):
    """The email or username is already registered."""
    status_code = 400
