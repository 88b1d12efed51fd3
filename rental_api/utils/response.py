from typing import Any


def message_response(message: str, **payload: Any) -> dict:
    return {"message": message, **payload}


def error_response(message: str, error: str | None = None) -> dict:
    body: dict = {"message": message}
    if error is not None:
        body["error"] = error
    return body
