from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ConversationIdentityError(ValueError):
    """Tentativo di cambiare l'id di una conversazione già identificata."""


class Conversation(BaseModel):
    """Conversazione remota.

    `id` è assegnato dal server alla creazione (vuoto fino ad allora) e, una
    volta valorizzato, non cambia più. Gli altri campi sono quelli forniti dal
    chiamante ed echeggiati dal server; campi sconosciuti vengono conservati
    come extra.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(default="", description="ID assegnato dal server", examples=["CON-1"])
    name: Optional[str] = Field(default=None, description="Nome univoco", examples=["customer_chat"])
    display_name: Optional[str] = Field(default=None, description="Nome visualizzato", examples=["Customer Chat"])
    properties: Dict[str, Any] = Field(default_factory=dict, description="Proprietà libere (ttl, ...)")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and self.id and value != self.id:
            raise ConversationIdentityError(f"Conversation id is immutable ({self.id!r} -> {value!r})")
        super().__setattr__(name, value)

    def to_payload(self) -> Dict[str, Any]:
        """Body JSON per POST/PUT: tutti i campi tranne `id`, senza i None."""
        return self.model_dump(mode="json", exclude={"id"}, exclude_none=True)

    def hydrate(self, data: Dict[str, Any]) -> "Conversation":
        """(Ri)popola i campi a partire dal JSON del server."""

        incoming = type(self).model_validate(data)
        if incoming.id:
            self.id = incoming.id

        for key in data:
            if key == "id":
                continue
            if key in type(self).model_fields:
                setattr(self, key, getattr(incoming, key))
            elif incoming.model_extra is not None and key in incoming.model_extra:
                self.__pydantic_extra__[key] = incoming.model_extra[key]
        return self

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "Conversation":
        return cls().hydrate(data)


# Un id "nudo" oppure una conversazione già esistente
ConversationRef = Union[str, Conversation]


def resolve_conversation(ref: ConversationRef) -> Conversation:
    """Normalizza un `ConversationRef` in una `Conversation` con id valorizzato."""

    if isinstance(ref, Conversation):
        conv = ref
    elif isinstance(ref, str):
        conv = Conversation(id=ref)
    else:
        raise TypeError(f"Expected conversation id or Conversation, got {type(ref).__name__}")

    if not conv.id:
        raise ValueError("Conversation has no id (create it first)")
    return conv


class ConversationFilter(BaseModel):
    """Query string per la lista conversazioni (passthrough verso l'API)."""

    date_start: Optional[str] = Field(default=None, description="ISO-8601, estremo inferiore creazione")
    date_end: Optional[str] = Field(default=None, description="ISO-8601, estremo superiore creazione")
    page_size: Optional[int] = Field(default=None, ge=1)
    record_index: Optional[int] = Field(default=None, ge=0)
    order: Optional[str] = Field(default=None, examples=["asc", "desc"])
    name: Optional[str] = Field(default=None)

    def to_params(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
