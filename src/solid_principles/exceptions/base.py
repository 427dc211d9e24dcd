"""Root of the solid_principles exception hierarchy."""

from typing import Dict


class SolidPrinciplesError(Exception):
    """
    Base exception for the package.

    Keyword arguments become ``details`` and are appended to the message as
    ``key=value`` pairs, so a logged error carries its context on one line.
    """

    def __init__(self, message: str, **details: object):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, str] = {key: str(value) for key, value in details.items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
