"""Transport HTTP verso la Conversations API.

Wrapper sottile su `httpx.Client` (sincrono):
- compone la URL a partire da `CONVERSATIONS_API_URL`
- aggiunge gli header comuni (content-type JSON, eventuale bearer token)
- restituisce la `httpx.Response` così com'è

Nota importante:
- Qui NON si chiama `raise_for_status()`: lo status atteso dipende
  dall'operazione (200 vs 204), quindi la traduzione in errori tipizzati
  avviene nel client (`error_from_response`) dopo aver letto il body.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from conversations_client.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def _default_headers(token: Optional[str]) -> Dict[str, str]:
    h: Dict[str, str] = {
        "content-type": JSON_CONTENT_TYPE,
        "accept": JSON_CONTENT_TYPE,
    }
    if token:
        h["Authorization"] = f"Bearer {token}"
    return h


class HTTPTransport:
    """Esegue una request e restituisce la response (status + body)."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
        settings: Optional[Settings] = None,
    ):
        cfg = settings or default_settings
        self.base_url = (base_url or cfg.api_url).rstrip("/")
        self._headers = _default_headers(token if token is not None else cfg.api_token)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout if timeout is not None else cfg.http_timeout)

    def url(self, path: str) -> str:
        return self.base_url + path

    def request(
        self,
        method: str,
        path: str,
        *,
        payload: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Invia la request; gli errori di rete (`httpx.HTTPError`) si propagano."""

        url = self.url(path)
        logger.debug("%s %s", method, url)

        resp = self._client.request(method, url, json=payload, params=params, headers=self._headers)

        if resp.status_code >= 400:
            logger.warning("%s %s -> HTTP %s", method, url, resp.status_code)
        else:
            logger.debug("%s %s -> HTTP %s", method, url, resp.status_code)
        return resp

    def close(self) -> None:
        # Un client passato dall'esterno resta di proprietà del chiamante
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
