class PetersenError(Exception):
    """
    Base error for graph construction. `kind` tags the failure, `message` says what went wrong.
    """
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(PetersenError, ValueError):
    kind = "invalid_argument"


class ConstructionError(PetersenError):
    kind = "construction_failed"
