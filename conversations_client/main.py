from __future__ import annotations

import logging

from conversations_client.api.conversations import ConversationsClient
from conversations_client.core.config import settings
from conversations_client.core.http_transport import HTTPTransport

logger = logging.getLogger(__name__)


# Singleton client (riutilizzato da tutto il processo)
_client: ConversationsClient | None = None


def configure_logging() -> None:
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))


def get_client() -> ConversationsClient:
    global _client
    if _client is None:
        _client = ConversationsClient(HTTPTransport(settings=settings))
        logger.info("%s ready (%s)", settings.app_name, settings.api_url)
    return _client


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
