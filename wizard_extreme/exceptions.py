"""Exceptions raised at the engine boundary."""


class WizardExtremeError(Exception):
    """Base exception for Wizard Extreme errors."""


class InvalidActionError(WizardExtremeError, ValueError):
    """Raised when an action index does not name any action."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Action index {index} is outside the action space")


class DimensionMismatchError(WizardExtremeError, ValueError):
    """Raised when a vector handed across the decision boundary has the wrong length."""

    def __init__(self, name: str, expected: int, actual: int) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{name} has length {actual}, expected {expected}")
