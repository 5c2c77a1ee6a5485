"""Exception hierarchy for the caretaker rotation."""


class RotaError(Exception):
    """Base class for every fatal rotation error."""


class ConfigMissingError(RotaError):
    """Configuration file not found or unreadable."""


class ConfigMalformedError(RotaError):
    """Configuration document is structurally invalid."""


class EmptyCaretakersError(RotaError, ValueError):
    """No caretakers configured, so there is nothing to rotate."""


class ReferenceDateError(RotaError, ValueError):
    """Reference week lies before the rotation start week."""
