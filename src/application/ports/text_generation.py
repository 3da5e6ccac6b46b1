"""Port for the external text-generation service.

The analysis use case depends on this protocol instead of a concrete SDK;
the Gemini adapter in the infrastructure layer provides the implementation.
"""

from typing import Any, Mapping, Protocol


class TextGenerationPort(Protocol):
    """Port producing structured JSON text from a prompt."""

    async def generate_json(
        self,
        prompt: str,
        response_schema: Mapping[str, Any],
    ) -> str | None:
        """Send one request and return the raw reply text.

        Args:
            prompt: Full prompt, instructions and serialized input included.
            response_schema: Schema the reply must conform to.

        Returns:
            str | None: Reply body, or None when the service returned no text.

        Raises:
            Exception: Any transport or service error, unwrapped.
        """


__all__ = ["TextGenerationPort"]
