class DomainError(Exception): ...


class MissingFieldError(DomainError):
    def __init__(self, message: str = "Missing name or email"):
        super().__init__(message)
