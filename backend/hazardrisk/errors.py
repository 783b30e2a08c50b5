"""
Lookup error taxonomy.

Every error carries a human-readable ``message`` that is shown to the user
verbatim. All of them end the current lookup session; none are retried.
"""

INVALID_ZIP_MESSAGE = "Please enter a valid 5-digit US ZIP code."
GEOCODER_UNAVAILABLE_MESSAGE = "Geocoding service unavailable"
NO_LOCATION_MESSAGE = "Could not find location for this ZIP code. Please check and try again."
NO_COUNTY_MESSAGE = "Could not determine county for this ZIP code."
NO_RISK_DATA_MESSAGE = "No NRI data found for this county."
RISK_DATA_UNAVAILABLE_MESSAGE = "FEMA API error: service unavailable"
RISK_DATA_INVALID_MESSAGE = "FEMA API error: invalid response"
GENERIC_ERROR_MESSAGE = "An error occurred. Please try again."
LOOKUP_IN_PROGRESS_MESSAGE = "A lookup is already in progress."


class RiskLookupError(Exception):
    """Base class for errors surfaced to the user during a lookup."""

    def __init__(self, message: str, not_found: bool = False):
        super().__init__(message)
        self.message = message
        # The thing looked up does not exist upstream (as opposed to a service failure)
        self.not_found = not_found


class InputValidationError(RiskLookupError):
    """The submitted ZIP code is not exactly five digits."""

    def __init__(self, message: str = INVALID_ZIP_MESSAGE):
        super().__init__(message)


class LocationResolutionError(RiskLookupError):
    """Geocoder unreachable, no address match, or no county in the match."""


class RiskDataError(RiskLookupError):
    """Hazard-index service failed or holds no record for the county."""

    def __init__(self, message: str, status_code: int | None = None, not_found: bool = False):
        super().__init__(message, not_found=not_found)
        self.status_code = status_code


class LookupInProgressError(RiskLookupError):
    """A new submission arrived while a lookup was still in flight."""

    def __init__(self, message: str = LOOKUP_IN_PROGRESS_MESSAGE):
        super().__init__(message)
