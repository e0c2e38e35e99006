from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ConversationEvent(BaseModel):
    """Evento di una conversazione (messaggio, member joined, ...).

    La shape dipende dal tipo di evento e dal server: i campi noti restano
    "larghi" (nessuna coercizione), il resto è disponibile come extra.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Optional[Union[int, str]] = Field(default=None, description="ID evento (progressivo per conversazione)")
    type: Optional[str] = Field(default=None, description="Tipo evento", examples=["text", "member:joined"])
    from_: Any = Field(default=None, alias="from", description="Member che ha generato l'evento")
    to: Any = Field(default=None, description="Member destinatario (se presente)")
    body: Any = Field(default=None, description="Payload dell'evento (shape dipende dal tipo)")
    timestamp: Any = Field(default=None, description="ISO-8601")
    href: Optional[str] = Field(default=None)
