class ResourceNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
