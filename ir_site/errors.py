"""Exception types raised by the IR site renderer."""


class IRSiteError(Exception):
    """Base class for all ir_site errors."""


class CMSFetchError(IRSiteError):
    """The CMS could not be reached, answered with an error, or sent bad data."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UnknownLayoutError(IRSiteError, KeyError):
    """No page layout is registered under the requested key."""

    def __str__(self) -> str:
        return f"Unknown layout: {self.args[0]}" if self.args else "Unknown layout"


class UnknownClusterError(IRSiteError, KeyError):
    """No component cluster is registered under the requested name."""

    def __str__(self) -> str:
        return f"Unknown component cluster: {self.args[0]}" if self.args else "Unknown component cluster"
