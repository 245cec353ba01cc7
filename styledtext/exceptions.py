"""
exceptions.py
=============
styledtext exception hierarchy.

StyledTextError
└── ConfigurationError

An unresolvable font name is not an error: it is reported through a
diagnostic sink and replaced by the system font.
"""


class StyledTextError(Exception):
    """Base exception for all styledtext errors."""

    def __init__(self, message: str = "", *, detail: str = ""):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


class ConfigurationError(StyledTextError):
    """Raised for invalid sizes, unknown category names or malformed style data."""
