"""
Domain errors for the beers bounded context.
Every error carries the HTTP status and code the API layer answers with.
"""


class BeerServiceError(Exception):
    """Base class for errors raised by the beer service and its collaborators."""

    status = 500
    error = "internal_server_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "status": self.status,
            "error": self.error,
        }


class BadRequestError(BeerServiceError):
    """Invalid input detected before touching any collaborator."""

    status = 400
    error = "bad_request"


class NotFoundError(BeerServiceError):
    """Requested beer does not exist."""

    status = 404
    error = "not_found"


class ConflictError(BeerServiceError):
    """A beer with the same id already exists."""

    status = 409
    error = "conflict"


class InternalServerError(BeerServiceError):
    """Storage or currency provider failure."""

    status = 500
    error = "internal_server_error"


class MissingCollaboratorError(RuntimeError):
    """The service was built without a collaborator the operation needs."""
