from typing import Protocol

from beacon.data import Usage


class TextGenerator(Protocol):
    """Interface for a generative text model."""

    async def generate(self, prompt: str) -> tuple[str, Usage]:
        """Complete a single prompt.

        Args:
            prompt: The full prompt text.

        Returns:
            Tuple of (raw completion text, usage). The text is not
            guaranteed to be valid JSON even when the prompt asks for it.

        Raises:
            UpstreamTransportError: If the model could not be reached.
        """
        ...
