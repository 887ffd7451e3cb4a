"""
Domain exceptions for reports app.

Raised by services and mapped to HTTP responses in views.
"""


class ReportServiceError(Exception):
    """Base exception for report services."""
    pass


class InvalidPeriodError(ReportServiceError):
    """Month or year outside the accepted range."""
    pass


class ReportNotFoundError(ReportServiceError):
    """Report does not exist."""
    pass


class ReportConflictError(ReportServiceError):
    """Another run stored a report for the same period at the same time."""
    pass
