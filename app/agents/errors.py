## Roadmap generation errors


class GenerationError(Exception):
    """Any failure to obtain roadmap text. Callers show one generic message."""

    def __init__(self, message: str, *, status_code: int | None = None, detail: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class ConfigurationError(GenerationError):
    pass


class TransportError(GenerationError):
    pass


class EmptyResponseError(GenerationError):
    pass
