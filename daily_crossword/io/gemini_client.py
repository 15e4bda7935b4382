"""Gemini REST client used by the LLM word source.

Only the ``generateContent`` endpoint is needed. Requests ask for a JSON
reply (``responseMimeType``) and callers parse the returned text.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

import requests

from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class GeminiAPIError(RuntimeError):
    """Raised when the Gemini API is unreachable or answers without text."""


class GeminiClient:
    API_BASE = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(
        self,
        model_name: str = "gemini-2.5-flash",
        api_key_env: str = "GEMINI_API_KEY",
        model_env: str = "GEMINI_MODEL",
        timeout_seconds: float = 30.0,
        temperature: float = 0.7,
        session: Optional[requests.Session] = None,
    ) -> None:
        api_key = os.environ.get(api_key_env)
        if not api_key:
            raise GeminiAPIError(f"Set {api_key_env} to use the Gemini word source")
        self._api_key = api_key
        self.model_name = os.environ.get(model_env) or model_name
        self.timeout_seconds = timeout_seconds
        self.temperature = temperature
        self._session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.API_BASE}/models/{self.model_name}:generateContent"

    def build_payload(self, prompt: str, system: str = "") -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "responseMimeType": "application/json",
            },
        }
        if system:
            payload["systemInstruction"] = {"parts": [{"text": system}]}
        return payload

    def generate_json(self, prompt: str, system: str = "") -> str:
        """Return the raw JSON text Gemini produced for ``prompt``.

        Transport failures, HTTP errors and undecodable bodies all surface as
        :class:`GeminiAPIError`.
        """
        try:
            response = self._session.post(
                self.endpoint,
                params={"key": self._api_key},
                json=self.build_payload(prompt, system),
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as exc:
            raise GeminiAPIError(f"Gemini request to {self.model_name} failed: {exc}") from exc
        except ValueError as exc:
            raise GeminiAPIError(f"Gemini reply from {self.model_name} is not JSON: {exc}") from exc

        text = self.extract_text(body)
        if text is None:
            LOGGER.warning("Gemini returned no text for model %s: %s", self.model_name, body)
            raise GeminiAPIError("Gemini reply contained no text")
        LOGGER.debug("Gemini replied with %s characters", len(text))
        return text

    @staticmethod
    def extract_text(body: Any) -> Optional[str]:
        """Join the text parts of the first candidate that has any.

        Returns ``None`` when the body does not have the expected shape.
        """
        if not isinstance(body, dict):
            return None
        candidates = body.get("candidates")
        if not isinstance(candidates, list):
            return None
        for candidate in candidates:
            if not isinstance(candidate, dict):
                continue
            content = candidate.get("content")
            parts = content.get("parts") if isinstance(content, dict) else None
            if not isinstance(parts, list):
                continue
            text = "".join(
                part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)
            )
            if text:
                return text
        return None
