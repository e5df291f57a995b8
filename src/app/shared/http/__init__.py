from .handlers import ErrorResponse, register_exception_handlers

__all__ = ["ErrorResponse", "register_exception_handlers"]
