"""Gemini adapter implementing the text-generation port."""

import asyncio
from typing import Any, Mapping

from google import genai


class GeminiTextGenerator:
    """TextGenerationPort implementation backed by the google-genai SDK.

    One ``generate_json`` call issues exactly one ``generate_content``
    request in JSON mode with the given response schema. The SDK client is
    created on first use, so a missing key surfaces as a failed request
    rather than at startup.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str,
        temperature: float = 0.1,
        timeout_seconds: float | None = None,
        client: Any = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            api_key: Secret key for the Gemini API.
            model: Model name.
            temperature: Sampling temperature.
            timeout_seconds: Optional request timeout; None waits forever.
            client: Optional preconfigured ``genai.Client``.
        """
        self._api_key = api_key
        self._client = client
        self._model = model
        self._temperature = temperature
        self._timeout_seconds = timeout_seconds or None

    async def generate_json(
        self,
        prompt: str,
        response_schema: Mapping[str, Any],
    ) -> str | None:
        """Return the JSON text produced for ``prompt``.

        Raises:
            RuntimeError: If no API key is configured.
            asyncio.TimeoutError: If the request exceeds the timeout.
            Exception: SDK and transport errors, unwrapped.
        """
        request = self._get_client().aio.models.generate_content(
            model=self._model,
            contents=prompt,
            config={
                "response_mime_type": "application/json",
                "response_schema": dict(response_schema),
                "temperature": self._temperature,
            },
        )
        response = await asyncio.wait_for(
            request,
            timeout=self._timeout_seconds,
        )
        return response.text

    def _get_client(self):
        if self._client is None:
            if not self._api_key:
                raise RuntimeError(
                    "Missing environment variable: GEMINI_API_KEY"
                )
            self._client = genai.Client(api_key=self._api_key)
        return self._client


__all__ = ["GeminiTextGenerator"]
