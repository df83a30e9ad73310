"""
Text Generation Module

Narrow interface over the language model: a prompt goes in, raw text comes out.
Nothing about the returned text is guaranteed; callers run it through the
response repair pipeline.

Dependencies:
- openai: For the AsyncOpenAI chat completions client.
- loguru: For logging call timings.
- auriter.core.ai_client_manager: For dedicated client instances.

"""

import os
import time
from typing import Optional, Protocol
from openai import AsyncOpenAI
from loguru import logger
from auriter.core.ai_client_manager import get_ai_client_manager

DEFAULT_MODEL = "deepseek-ai/deepseek-r1"


class TextGenerator(Protocol):
    async def generate_text(self, prompt: str) -> str:
        ...


class ChatCompletionTextGenerator:
    """
    TextGenerator backed by an OpenAI-compatible chat completions endpoint.

    Attributes:
        service_type (str): Which dedicated client from the AIClientManager to use.
        model (str): Model name sent with every request.
    """

    def __init__(self, service_type: str, model: Optional[str] = None, client: Optional[AsyncOpenAI] = None):
        self.service_type = service_type
        self.model = model or os.getenv("NVIDIA_MODEL", DEFAULT_MODEL)
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = get_ai_client_manager().get_client(self.service_type)
        return self._client

    async def generate_text(self, prompt: str) -> str:
        start_time = time.time()
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=0.6,
            top_p=0.7,
            max_tokens=4096,
        )
        logger.info(f"[{self.service_type}] LLM call completed in {time.time() - start_time:.3f}s")

        content = response.choices[0].message.content
        return content or ""
