from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.beers.domain.exceptions import BeerServiceError


def beer_exception_handler(exc, context):
    """
    Render BeerServiceError as {"message", "status", "error"} with its status code.
    Anything else goes through DRF's default handler.
    """
    if isinstance(exc, BeerServiceError):
        return Response(exc.to_dict(), status=exc.status)

    return exception_handler(exc, context)
