"""Errori restituiti dalla Conversations API.

Ogni risposta con status diverso da quello atteso dall'operazione diventa una
eccezione strutturata (status + messaggio + body parseato), mai un `False`
silenzioso.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, ClassVar

import httpx

from conversations_client.utils.payloads import DEFAULT_ERROR_MESSAGE, extract_error_title

UNEXPECTED_STATUS_MESSAGE = "Unexpected HTTP status code"


class ErrorKind(str, enum.Enum):
    CLIENT = "client_error"
    SERVER = "server_error"
    UNEXPECTED = "unexpected"


@dataclass(eq=False)
class ApiError(Exception):
    """Errore HTTP dalla Conversations API."""

    status_code: int
    message: str = DEFAULT_ERROR_MESSAGE
    url: str = ""
    body: Any = field(default=None, repr=False)

    kind: ClassVar[ErrorKind] = ErrorKind.UNEXPECTED

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message} (HTTP {self.status_code})"


class ClientError(ApiError):
    """Status 4xx."""

    kind = ErrorKind.CLIENT


class ServerError(ApiError):
    """Status 5xx."""

    kind = ErrorKind.SERVER


class UnexpectedStatusError(ApiError):
    """Status fuori da 4xx/5xx ma diverso da quello atteso (es. 201 o 302).

    Non è un errore "normale": indica che client e server non parlano lo
    stesso contratto, quindi non va ritentato.
    """

    kind = ErrorKind.UNEXPECTED


class InvalidResponseError(ApiError):
    """Risposta di successo con body non JSON o con shape inattesa."""

    kind = ErrorKind.UNEXPECTED


def read_error_body(resp: httpx.Response) -> Any:
    """Body di errore parseato; se non è JSON torna `{"raw": <testo>}`."""
    try:
        return resp.json()
    except ValueError:
        return {"raw": resp.text}


def error_from_response(resp: httpx.Response) -> ApiError:
    """Converte una risposta non riuscita nell'errore tipizzato corrispondente."""

    status = resp.status_code
    try:
        url = str(resp.request.url)
    except RuntimeError:
        # Response costruita a mano (senza request associata)
        url = ""
    body = read_error_body(resp)

    if 400 <= status < 500:
        return ClientError(status_code=status, message=extract_error_title(body), url=url, body=body)
    if 500 <= status < 600:
        return ServerError(status_code=status, message=extract_error_title(body), url=url, body=body)
    return UnexpectedStatusError(status_code=status, message=UNEXPECTED_STATUS_MESSAGE, url=url, body=body)
