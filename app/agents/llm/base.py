## Base LLM Client Interface
from abc import ABC, abstractmethod


class LLMClient(ABC):
    @abstractmethod
    async def generate_text(self, prompt: str) -> str:
        """
        Send one prompt and return the generated text.
        Raise TransportError when the call fails and EmptyResponseError when
        it succeeds without text.
        """
        raise NotImplementedError
