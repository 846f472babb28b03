"""
Exceptions raised by the auxiliary services.
"""


class ServiceError(Exception):
    """Base class for service-level failures the HTTP layer maps to a status code."""
    status_code = 400


class InvalidCredentialsError(ServiceError):
    status_code = 401

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class EmailAlreadyExistsError(ServiceError):
    status_code = 409

    def __init__(self, message: str = "Email already exists"):
        super().__init__(message)


class NotAuthenticatedError(ServiceError):
    status_code = 401

    def __init__(self, message: str = "Must be logged in"):
        super().__init__(message)


class NotFoundError(ServiceError):
    status_code = 404
