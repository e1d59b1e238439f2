"""Tagged results and their JSON envelope.

Handlers return ``Success``, ``ClientError`` or ``ServerError`` and the
category travels with the value instead of being derived from the status
code afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from fastapi import status
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from .schemas import FailedConnection


@dataclass(frozen=True)
class Success:
    payload: BaseModel
    status_code: int = status.HTTP_200_OK

    def to_response(self) -> JSONResponse:
        return JSONResponse(self.payload.model_dump(), status_code=self.status_code)


@dataclass(frozen=True)
class ClientError:
    message: str
    status_code: int = status.HTTP_400_BAD_REQUEST

    def to_response(self) -> JSONResponse:
        return JSONResponse(FailedConnection(message=self.message).model_dump(), status_code=self.status_code)


@dataclass(frozen=True)
class ServerError:
    message: str
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def to_response(self) -> JSONResponse:
        return JSONResponse(FailedConnection(message=self.message).model_dump(), status_code=self.status_code)


Result = Union[Success, ClientError, ServerError]


def empty_response(status_code: int) -> Response:
    """Bodiless reply used for malformed bodies and unimplemented paths."""
    return Response(content=b"", status_code=status_code)


__all__ = ["Success", "ClientError", "ServerError", "Result", "empty_response"]
