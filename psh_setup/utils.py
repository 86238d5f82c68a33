# stdlib
import json
from typing import Any, Dict, Optional

# third party
import requests


def bearer_headers(bearer_token: Optional[str]) -> Dict[str, str]:
    return {"Authorization": f"Bearer {bearer_token}"}


def _response_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def serialize_error(error: BaseException) -> str:
    """
    Dump an error raised during setup as indented JSON.

    Request errors also carry the request method and URL and, when the server
    answered, its status code and body. Request headers are left out so the
    bearer token never reaches the console.
    """
    details: Dict[str, Any] = {
        "name": type(error).__name__,
        "message": str(error),
    }

    if isinstance(error, requests.RequestException):
        request = error.request
        if request is not None:
            details["method"] = request.method
            details["url"] = request.url

        response = error.response
        if response is not None:
            details["status"] = response.status_code
            details["data"] = _response_body(response)

    return json.dumps(details, indent=2, default=str)
