"""Generative pattern source on the Gemini REST API."""

import json
import logging
import re
from collections.abc import Mapping
from typing import Any, Literal

import httpx
from pydantic import BaseModel, Field, ValidationError

from gitartist.domain import Drawing, DrawingIntent, PatternGenerationError, parse_pixels

logger = logging.getLogger(__name__)

GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-1.5-flash-latest"

# First {...} block, the models like to wrap JSON in prose or fences
_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

TRIAGE_PROMPT = """\
You are the triage system of a CLI that paints pixel art on a GitHub contribution graph.
Classify the user's request into exactly one intent and answer with a single JSON object.

1. "text": the user wants to write a word, name, or any letters/numbers
   ("write", "spell", "my name", or a bare name such as "evin").
   {{"intent": "text", "plan": "Rendering the text '<text>'.", "parameters": {{"text": "<text>"}}}}
2. "known_shape": the request matches one of these shapes: {shapes}.
   {{"intent": "known_shape", "plan": "Using the pre-made '<name>' pattern.", "parameters": {{"name": "<name>"}}}}
3. "custom_shape": anything else that is not text and not a known shape.
   {{"intent": "custom_shape", "plan": "Generating a custom pixel art of <description>.", \
"parameters": {{"description": "<user request>"}}}}

Respond with the JSON object only.
"""

ARTIST_PROMPT = """\
You are a pixel artist drawing on a GitHub contribution graph.

Canvas: 7 rows ('d', 0=Sunday to 6=Saturday) and as many week columns ('w') as needed.
Output a single JSON object with one key, "pixels": an array of [w, d, density] entries,
density from 1 (light) to 4 (dark).

Use all four density levels for shading, keep the drawing compact (10-25 weeks wide)
and recognizable. Respond with the JSON object only, without markdown fences.
"""


class TriageResponse(BaseModel):
    """Schema of the triage answer."""

    intent: Literal["text", "known_shape", "custom_shape"]
    plan: str = ""
    parameters: dict[str, Any] = Field(default_factory=dict)


def extract_json_object(text: str) -> Any:
    """Parse the first JSON object embedded in model output.

    Raises:
        ValueError: No object found or it is not valid JSON.
    """
    match = _JSON_OBJECT.search(text)
    if not match:
        raise ValueError("No JSON object in response")
    return json.loads(match.group(0))


class GeminiPatternGenerator:
    """Implements PatternGeneratorPort with two prompts: triage and artist."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        shape_names: list[str] | None = None,
        api_url: str = GEMINI_API_URL,
        timeout: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._shape_names = shape_names or []
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def triage(self, request: str) -> DrawingIntent:
        system = TRIAGE_PROMPT.format(shapes=", ".join(self._shape_names) or "none")
        text = self._generate(system, f'User Request: "{request}"')
        try:
            response = TriageResponse.model_validate(extract_json_object(text))
        except (ValueError, ValidationError) as e:
            raise PatternGenerationError(f"Triage produced an unusable answer: {e}") from e

        intent = DrawingIntent(
            intent=response.intent,
            plan=response.plan,
            parameters=response.parameters,
        )
        if response.intent == "custom_shape":
            # Draw right away so the first preview needs no extra round trip
            description = str(response.parameters.get("description") or request)
            return DrawingIntent(
                intent=intent.intent,
                plan=intent.plan,
                parameters={**intent.parameters, "description": description},
                pixels=self.generate_pixels(description),
            )
        return intent

    def generate_pixels(self, description: str) -> Drawing:
        text = self._generate(ARTIST_PROMPT, f'User Request: "{description}"')
        try:
            data = extract_json_object(text)
        except ValueError as e:
            logger.warning("Artist response was not JSON: %s", e)
            return Drawing()
        if not isinstance(data, Mapping):
            return Drawing()
        return parse_pixels(data.get("pixels"))

    def _generate(self, system: str, prompt: str) -> str:
        url = f"{self._api_url}/models/{self._model}:generateContent"
        body = {
            "systemInstruction": {"parts": [{"text": system}]},
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        }
        try:
            with httpx.Client(transport=self._transport, timeout=self._timeout) as client:
                response = client.post(url, json=body, headers={"x-goog-api-key": self._api_key})
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise PatternGenerationError(
                f"Generative API returned {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise PatternGenerationError(f"Could not reach the generative API: {e}") from e

        return _candidate_text(response.json())


def _candidate_text(payload: Any) -> str:
    try:
        parts = payload["candidates"][0]["content"]["parts"]
        return "".join(part.get("text", "") for part in parts)
    except (KeyError, IndexError, TypeError) as e:
        raise PatternGenerationError("Generative API response had no candidates") from e
