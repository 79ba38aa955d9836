from fastapi import Request
import json
import logging

from condo_portal.core.exceptions import InternalError

logger = logging.getLogger(__name__)

MALFORMED_BODY_MESSAGE = "Failed to read request body"


async def read_json_body(request: Request):
    """Decode the request body as JSON.

    An empty body decodes to an empty object so that a missing payload is
    reported by field validation rather than as a server error.

    Raises:
        InternalError: If the body is not valid JSON
    """
    body = await request.body()
    if not body.strip():
        return {}

    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Malformed JSON body on {request.method} {request.url.path}: {str(e)}")
        raise InternalError(MALFORMED_BODY_MESSAGE) from e
