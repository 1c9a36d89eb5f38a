"""Response envelope discrimination."""

from typing import Any, Mapping, Optional

from .core.logging import get_logger
from .errors import FortniteAPIError
from .models import ErrorEnvelope, SuccessEnvelope

logger = get_logger(__name__)

SUCCESS_STATUS = 200


def is_error_envelope(body: Mapping[str, Any]) -> bool:
    """
    Check whether a response body is an error envelope.

    Current API versions always embed ``status``; older ones omit it and only
    signal failure through an ``error`` field. Either marker counts.
    """
    if "error" in body:
        return True
    return "status" in body and body["status"] != SUCCESS_STATUS


def unwrap(
    body: Mapping[str, Any], route: str, http_status: Optional[int] = None
) -> Any:
    """
    Return the payload of a success envelope or raise for an error envelope.

    Args:
        body: Parsed JSON response body
        route: URL the body was fetched from
        http_status: Transport status, used when the envelope has no ``status``

    Returns:
        ``body["data"]``, untouched

    Raises:
        FortniteAPIError: If the body is an error envelope
    """
    if not is_error_envelope(body):
        return SuccessEnvelope.model_validate(body).data

    envelope = ErrorEnvelope.model_validate(body)
    status_code = envelope.status if envelope.status is not None else http_status
    logger.warning(
        "Fortnite-API returned an error",
        status_code=status_code,
        error=envelope.message,
        route=route,
    )
    raise FortniteAPIError(
        envelope.message,
        status_code=status_code,
        route=route,
        response_data=dict(body),
    )
