"""
Exceptions raised while parsing hostlist notation.

All of them derive from ValueError so callers that only expect a
"bad format" error keep working.
"""


class HostListError(ValueError):
    """Base class for hostlist parsing failures."""

    reason = "invalid hostlist"

    def __init__(self, token: str, detail: str = ""):
        self.token = token
        self.detail = detail
        message = f"{self.reason}: '{token}'"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class DuplicateBracketError(HostListError):
    reason = "duplicate brackets"


class IsolatedBracketError(HostListError):
    reason = "isolated bracket"


class InvalidRangeBoundaryError(HostListError):
    reason = "invalid range boundary"


class InvalidUnitTokenError(HostListError):
    reason = "invalid bracket unit"


class ExpansionLimitError(HostListError):
    reason = "expansion too large"
