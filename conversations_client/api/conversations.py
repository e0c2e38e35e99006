"""Client per la collection `conversations` (API v0.1).

Ogni operazione è una singola request indipendente: niente retry, niente
cursori di paginazione, niente stato condiviso oltre al transport e al filtro
di default.

Policy errori: qualsiasi status diverso da quello atteso solleva un
`ApiError` tipizzato (vedi `conversations_client.core.errors`). I booleani
restituiti da `update`/`delete` sono quindi sempre `True`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from conversations_client.core.errors import InvalidResponseError, error_from_response
from conversations_client.core.http_transport import HTTPTransport
from conversations_client.schemas.conversations import (
    Conversation,
    ConversationFilter,
    ConversationRef,
    resolve_conversation,
)
from conversations_client.schemas.events import ConversationEvent
from conversations_client.utils.payloads import extract_items

logger = logging.getLogger(__name__)

API_VERSION = "v0.1"


def _decode(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        raise InvalidResponseError(
            status_code=resp.status_code,
            message="Response body is not valid JSON",
            url=str(resp.request.url),
            body={"raw": resp.text},
        )


def _decode_object(resp: httpx.Response) -> Dict[str, Any]:
    body = _decode(resp)
    if not isinstance(body, dict):
        raise InvalidResponseError(
            status_code=resp.status_code,
            message="Expected a JSON object",
            url=str(resp.request.url),
            body=body,
        )
    return body


def _invalid(resp: httpx.Response, body: Any, exc: Exception) -> InvalidResponseError:
    return InvalidResponseError(
        status_code=resp.status_code,
        message=f"Unexpected response shape: {exc}",
        url=str(resp.request.url),
        body=body,
    )


class ConversationsClient:
    """Create/read/update/delete sulla collection delle conversazioni."""

    collection_name = "conversations"

    def __init__(self, transport: HTTPTransport, filter: Optional[ConversationFilter] = None):
        self.transport = transport
        self.filter = filter

    @classmethod
    def collection_path(cls) -> str:
        return f"/{API_VERSION}/{cls.collection_name}"

    def _entity_path(self, conversation: Conversation) -> str:
        return f"{self.collection_path()}/{conversation.id}"

    def _expect(self, resp: httpx.Response, status_code: int) -> None:
        if resp.status_code != status_code:
            raise error_from_response(resp)

    # ---------------------------------------------------------------------
    # Operazioni
    # ---------------------------------------------------------------------

    def create(self, conversation: Conversation) -> Conversation:
        """POST della conversazione; restituisce una NUOVA istanza con l'id del server."""

        resp = self.transport.request("POST", self.collection_path(), payload=conversation.to_payload())
        self._expect(resp, 200)

        body = _decode_object(resp)
        try:
            created = Conversation.from_response(body)
        except ValidationError as e:
            raise _invalid(resp, body, e)

        if not created.id:
            raise InvalidResponseError(
                status_code=resp.status_code,
                message="Created conversation has no id",
                url=str(resp.request.url),
                body=body,
            )

        logger.info("Conversation created: %s", created.id)
        return created

    def get(self, ref: ConversationRef) -> Conversation:
        """GET di una conversazione (per id o istanza esistente, che viene re-idratata)."""

        conversation = resolve_conversation(ref)
        resp = self.transport.request("GET", self._entity_path(conversation))
        self._expect(resp, 200)

        body = _decode_object(resp)
        try:
            return conversation.hydrate(body)
        except ValidationError as e:
            raise _invalid(resp, body, e)

    def update(self, conversation: Conversation) -> bool:
        """PUT dei campi della conversazione.

        Se il server echeggia la risorsa aggiornata, l'istanza viene re-idratata.
        Un id "nudo" non è accettato: non ha campi da inviare.
        """

        if not isinstance(conversation, Conversation):
            raise TypeError(f"update() needs a Conversation, got {type(conversation).__name__}")
        conversation = resolve_conversation(conversation)
        resp = self.transport.request("PUT", self._entity_path(conversation), payload=conversation.to_payload())
        self._expect(resp, 200)

        # Body opzionale: alcune versioni rispondono 200 senza contenuto
        if resp.content:
            body = _decode_object(resp)
            try:
                conversation.hydrate(body)
            except ValidationError as e:
                raise _invalid(resp, body, e)
        return True

    def delete(self, ref: ConversationRef) -> bool:
        conversation = resolve_conversation(ref)
        resp = self.transport.request("DELETE", self._entity_path(conversation))
        self._expect(resp, 204)

        logger.info("Conversation deleted: %s", conversation.id)
        return True

    def list_events(self, ref: ConversationRef) -> List[ConversationEvent]:
        """Eventi della conversazione (una sola pagina, passthrough)."""

        conversation = resolve_conversation(ref)
        resp = self.transport.request("GET", f"{self._entity_path(conversation)}/events")
        self._expect(resp, 200)

        body = _decode(resp)
        items = extract_items(body, "events")
        if items is None:
            raise _invalid(resp, body, ValueError("no events list in body"))
        try:
            return [ConversationEvent.model_validate(item) for item in items]
        except ValidationError as e:
            raise _invalid(resp, body, e)

    def list(self, filter: Optional[ConversationFilter] = None) -> List[Conversation]:
        """Lista conversazioni; usa `filter` o, se assente, il filtro di default."""

        active = filter or self.filter
        params = active.to_params() if active is not None else None
        resp = self.transport.request("GET", self.collection_path(), params=params)
        self._expect(resp, 200)

        body = _decode(resp)
        items = extract_items(body, self.collection_name)
        if items is None:
            raise _invalid(resp, body, ValueError("no conversations list in body"))
        try:
            return [Conversation.from_response(item) for item in items]
        except ValidationError as e:
            raise _invalid(resp, body, e)

    # ---------------------------------------------------------------------
    # Accesso per indice: non supportato (usare get/create)
    # ---------------------------------------------------------------------

    def __setitem__(self, key: Any, value: Any) -> None:
        raise TypeError("can not set collection items, use create() or update()")

    def __delitem__(self, key: Any) -> None:
        raise TypeError("can not delete collection items by index, use delete()")

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "ConversationsClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
