"""OpenAI Responses API client for structured generation."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from quickchef.services.generation import GenerationClient


@dataclass
class OpenAIGenerationClient(GenerationClient):
    """Generation client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIGenerationClient":
        """Create an OpenAI generation client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        instructions: str | None,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> str | None:
        """Call OpenAI Responses API with structured outputs."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": [
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "strict": True,
                    "schema": schema,
                }
            },
            "store": store,
        }
        if instructions:
            request_payload["instructions"] = instructions
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        return response.output_text or None

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
