from typing import Optional


class FetchError(Exception):
    """
    Raised when a SpaceX API call fails: transport error, non-2xx status, or a body that is not the expected JSON.
    """
    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} ({self.url})"
        return self.message


class StateTransitionError(ValueError):
    """Raised when a screen receives an event that is not legal in its current status."""
