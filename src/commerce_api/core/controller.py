"""
Request pipeline.

``process`` turns an ``async handler(dto)`` into a FastAPI endpoint which:

1. merges configured path parameters into the JSON body,
2. sanitizes and validates the body against the request contract,
3. invokes the handler with the sanitized value,
4. sanitizes the return value against the response contract,
5. writes the response with the expected success status.

Any exception raised along the way is handed to the error mapper, so the
endpoint always answers with exactly one response.
"""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from .constants import ResponseStatusCode
from .dto import Contract, sanitize_from_dto, sanitize_to_dto, validate_dto
from .error_handlers import get_error_handler
from .exceptions import InternalError, InvalidRequestError, NotFoundError
from .logging import get_logger_with_context

Handler = Callable[[dict[str, Any]], Awaitable[Any]]
Endpoint = Callable[[Request], Awaitable[Response]]

INVALID_PARAMETERS_MESSAGE = "One or more request parameters are invalid or missing."


async def read_json_body(request: Request) -> Any:
    """Decoded JSON body; an empty body reads as an empty object."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except UnicodeDecodeError as exc:
        raise InvalidRequestError(message=f"Malformed JSON request body: {exc.reason}.") from exc


def merge_path_params(body: dict[str, Any], path_params: dict[str, Any], names: Sequence[str]) -> None:
    for name in names:
        if name not in path_params:
            raise InternalError(f"Expecting parameter in URL {name}, but not found.")
        if name in body and body[name] != path_params[name]:
            raise InvalidRequestError(
                params={
                    name: f"Request parameter {name} needs to be identical in URL and request body"
                },
                message=f"Cannot have different values for parameter {name} in URL and request body.",
            )
        body[name] = path_params[name]


def sanitize_and_validate(contract: Contract, body: Any) -> dict[str, Any]:
    """Sanitize ``body`` against ``contract`` or raise ``InvalidRequestError``."""
    if isinstance(body, list):
        raise InvalidRequestError(message="Request body must be a JSON object, not an array.")
    if not isinstance(body, dict):
        raise InvalidRequestError(message="Request body must be a JSON object.")

    dto = sanitize_to_dto(contract, body)
    errors = validate_dto(contract, dto)
    if errors:
        raise InvalidRequestError(params=errors, message=INVALID_PARAMETERS_MESSAGE)
    return dto


def process(
    request_dto: Contract,
    response_dto: Contract | None = None,
    status_code: ResponseStatusCode = ResponseStatusCode.OK,
    merge_params: Sequence[str] = (),
    not_found_when_none: bool = False,
) -> Callable[[Handler], Endpoint]:
    """
    Wrap a handler into a FastAPI endpoint.

    Args:
        request_dto: Contract of the request body (after path parameters are merged)
        response_dto: Contract the handler's return value is projected onto
        status_code: Status written on success
        merge_params: Path parameters copied into the body
        not_found_when_none: Answer 404 instead of 500 when the handler returns None
    """

    def decorator(handler: Handler) -> Endpoint:
        logger = get_logger_with_context(handler.__module__, handler=handler.__name__)

        async def endpoint(request: Request) -> Response:
            try:
                body = await read_json_body(request)
                if merge_params and isinstance(body, dict):
                    merge_path_params(body, dict(request.path_params), merge_params)
                dto = sanitize_and_validate(request_dto, body)

                result = await handler(dto)

                if status_code == ResponseStatusCode.NO_CONTENT:
                    logger.debug(f"{request.method} {request.url.path} -> {int(status_code)}")
                    return Response(status_code=int(status_code))

                if response_dto is not None:
                    if result is None:
                        if not_found_when_none:
                            raise NotFoundError(
                                f"The resource ID {request.path_params.get('id')} does not exist."
                            )
                        raise InternalError(
                            f"Handler {handler.__name__} returned no value for {response_dto.name}."
                        )
                    result = sanitize_from_dto(response_dto, result)

                logger.debug(f"{request.method} {request.url.path} -> {int(status_code)}")
                return JSONResponse(status_code=int(status_code), content=jsonable_encoder(result))
            except Exception as exc:
                return get_error_handler().to_response(exc, request)

        endpoint.__name__ = handler.__name__
        endpoint.__qualname__ = handler.__qualname__
        endpoint.__doc__ = handler.__doc__
        return endpoint

    return decorator


def create(request_dto: Contract, response_dto: Contract, merge_params: Sequence[str] = ()):
    return process(request_dto, response_dto, ResponseStatusCode.CREATED, merge_params)


def get(request_dto: Contract, response_dto: Contract, merge_params: Sequence[str] = ("id",)):
    return process(
        request_dto, response_dto, ResponseStatusCode.OK, merge_params, not_found_when_none=True
    )


def update(request_dto: Contract, response_dto: Contract, merge_params: Sequence[str] = ("id",)):
    return process(request_dto, response_dto, ResponseStatusCode.OK, merge_params)


def delete(request_dto: Contract, merge_params: Sequence[str] = ("id",)):
    return process(request_dto, None, ResponseStatusCode.NO_CONTENT, merge_params)


def list_(request_dto: Contract, response_dto: Contract):
    return process(request_dto, response_dto, ResponseStatusCode.OK)
