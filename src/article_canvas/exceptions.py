"""Exceptions raised by the template and workflow engine."""


class EngineError(Exception):
    """Base exception for all engine errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class InvalidArgumentError(EngineError):
    """Raised when construction input is malformed."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class ElementNotFoundError(EngineError):
    """Raised when an element id does not exist in a layout or skeleton."""

    def __init__(self, element_id: str, message: str | None = None):
        self.element_id = element_id
        super().__init__(message or f"Element not found: {element_id}")


class InvalidTransitionError(EngineError):
    """Raised when the workflow rejects an article state transition."""

    def __init__(self, from_state, to_state, message: str | None = None):
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            message
            or f"Invalid state transition from {_state_name(from_state)} "
            f"to {_state_name(to_state)}"
        )


def _state_name(state) -> str:
    return getattr(state, "name", str(state))
