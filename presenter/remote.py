"""
HTTP Helpers

Single place where outbound JSON calls are made and where HTTP failures are
turned into RemoteCallError. No retries: the first failure aborts the run.
"""

import logging
from typing import Any, Dict, Optional

import requests

from presenter.errors import RemoteCallError


logger = logging.getLogger(__name__)


def _response_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def post_json(
    session: requests.Session,
    url: str,
    operation: str,
    payload: Dict[str, Any],
    headers: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None
) -> Any:
    """POST a JSON payload and return the decoded JSON response.

    Args:
        session: HTTP session to send the request with
        url: Endpoint URL
        operation: Short description used in the "Failed to ..." message
        payload: JSON body
        headers: Extra request headers
        timeout: Request timeout in seconds

    Returns:
        Decoded JSON body (or raw text when the body is not JSON)

    Raises:
        RemoteCallError: On connection failure, timeout or non-2xx status
    """
    logger.debug(f"POST {url} ({operation})")

    try:
        response = session.post(url, json=payload, headers=headers, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.error(f"Failed to {operation}: {e}")
        raise RemoteCallError(operation) from e

    if not response.ok:
        body = _response_body(response)
        logger.error(f"Failed to {operation}: status {response.status_code}")
        logger.error(f"Response data: {body}")
        raise RemoteCallError(operation, status_code=response.status_code, response_body=body)

    return _response_body(response)
