"""Helper per i body JSON della Conversations API.

La shape delle risposte non è sempre la stessa tra le versioni dell'API
(array top-level, wrapper `_embedded` stile HAL, chiave diretta).

Questo modulo fornisce:
- estrazione del messaggio di errore (best-effort)
- estrazione della lista di elementi da una risposta "collection"
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

DEFAULT_ERROR_MESSAGE = "Unexpected error"


def extract_error_title(body: Any) -> str:
    """Messaggio leggibile da un body di errore.

    `error_title` ha precedenza su `description`; in assenza di entrambi si
    usa un messaggio generico.
    """

    if not isinstance(body, dict):
        return DEFAULT_ERROR_MESSAGE

    for key in ("error_title", "description"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value

    return DEFAULT_ERROR_MESSAGE


def extract_items(body: Any, key: str) -> Optional[List[Dict[str, Any]]]:
    """Estrae gli elementi di una collection.

    Varianti supportate (in ordine):
    - array top-level: `[{...}, {...}]`
    - HAL: `{"_embedded": {"<key>": [...]}}`
    - chiave diretta: `{"<key>": [...]}`
    - `{"items": [...]}`

    Ritorna None se nessuna variante è riconosciuta o se la lista contiene
    elementi che non sono oggetti JSON.
    """

    if isinstance(body, list):
        return _objects_only(body)

    if not isinstance(body, dict):
        return None

    embedded = body.get("_embedded")
    candidates = [
        embedded.get(key) if isinstance(embedded, dict) else None,
        body.get(key),
        body.get("items"),
    ]
    for candidate in candidates:
        if isinstance(candidate, list):
            return _objects_only(candidate)

    return None


def _objects_only(items: List[Any]) -> Optional[List[Dict[str, Any]]]:
    if all(isinstance(item, dict) for item in items):
        return items
    return None
