from __future__ import annotations

import base64
import json
import logging
from typing import Any, Optional, Protocol

from google import genai
from google.genai import types

from ..core.exceptions import RosterParseError
from .model import RosterEntry

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"

ROSTER_PROMPT = """
Analiza este documento que contiene una lista de estudiantes.
Extrae los nombres completos de los estudiantes y sus números de identificación si están presentes.
Limpia los nombres de caracteres especiales extraños.
Devuelve los datos en un formato de arreglo JSON estructurado.
"""

ROSTER_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "name": types.Schema(type=types.Type.STRING, description="Nombre completo del estudiante"),
            "externalId": types.Schema(type=types.Type.STRING, description="ID o Matrícula"),
        },
        required=["name", "externalId"],
        property_ordering=["name", "externalId"],
    ),
)


class RosterParser(Protocol):
    def parse_roster(self, data: bytes, media_type: str) -> list[RosterEntry]:
        """Extract student names from a document. Raise RosterParseError on failure."""

        raise NotImplementedError


def strip_data_url(data: bytes) -> bytes:
    """Accept both raw bytes and a `data:<type>;base64,...` upload."""
    if data.startswith(b"data:"):
        _, sep, encoded = data.partition(b",")
        if sep:
            return base64.b64decode(encoded)
    return data


def entries_from_json(text: str) -> list[RosterEntry]:
    items = json.loads(text.strip() or "[]")
    if not isinstance(items, list):
        raise ValueError("expected a JSON array")

    entries = []
    for item in items:
        if not isinstance(item, dict):
            continue
        name = item.get("name")
        if not isinstance(name, str):
            continue
        external_id = item.get("externalId")
        entries.append(RosterEntry(name=name, external_id=str(external_id) if external_id else None))
    return entries


class GeminiRosterParser:
    """Document understanding through the Gemini API (google-genai)."""

    def __init__(self, *, api_key: Optional[str] = None, model: str = DEFAULT_GEMINI_MODEL, client: Any = None):
        self._api_key = api_key
        self._model = model
        self._client = client

    def _get_client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key) if self._api_key else genai.Client()
        return self._client

    def parse_roster(self, data: bytes, media_type: str) -> list[RosterEntry]:
        try:
            response = self._get_client().models.generate_content(
                model=self._model,
                contents=[
                    types.Part.from_bytes(data=strip_data_url(data), mime_type=media_type),
                    ROSTER_PROMPT,
                ],
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=ROSTER_SCHEMA,
                ),
            )
            return entries_from_json(response.text or "[]")
        except Exception as e:
            logger.exception("Gemini roster parse failed")
            raise RosterParseError(f"No se pudo analizar el documento: {e}") from e
