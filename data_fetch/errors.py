"""
TapWatch · Report Errors

Failure taxonomy for the report pipeline. Malformed or absent contaminant
data is not an error: it is reported as an empty report.
"""

from typing import Optional


class WaterReportError(Exception):
    """Base class for report pipeline failures."""


class MissingInputError(WaterReportError):
    """Raised when a zip code or PWSID was not supplied."""


class UpstreamUnavailableError(WaterReportError):
    """Raised on a transport failure or a non-success provider response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NoSystemsFoundError(WaterReportError):
    """Raised when a zip lookup succeeds but matches no water systems."""

    def __init__(self, zip_code: str):
        super().__init__(f"No water systems found for zip code {zip_code}")
        self.zip_code = zip_code
