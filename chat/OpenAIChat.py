# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-09
# Description: OpenAIChat
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import openai
from openai import AzureOpenAI, OpenAI

from config.Config import Config
from utility.errors import ChatProviderError
from utility.logging_utils import get_class_logger

Message = Dict[str, str]  # {"role": "system"|"user"|"assistant", "content": "..."}


@dataclass
class OpenAIChat:
    """
        Chat-completions client that turns an assembled documents prompt into
        an answer. Uses Azure OpenAI when cfg.openai_azure_endpoint is set
        (openai_chat_model is then the deployment name).
    """

    cfg: Config
    client: Any = None
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

        if not self.cfg.openai_chat_model:
            raise ValueError("Config missing openai_chat_model")
        self.model = self.cfg.openai_chat_model

        if self.client is None:
            self.client = self._init_client()

        self.logger.info("OpenAIChat initialised (model=%s, azure=%s)", self.model, self.cfg.uses_azure)

    def _init_client(self) -> OpenAI | AzureOpenAI:
        if self.cfg.uses_azure:
            return AzureOpenAI(
                api_key=self.cfg.openai_api_key,
                azure_endpoint=self.cfg.openai_azure_endpoint,
                api_version=self.cfg.openai_azure_api_version,
            )
        return OpenAI(api_key=self.cfg.openai_api_key, base_url=self.cfg.openai_base_url or None)

    def complete(
            self,
            messages: List[Message],
            *,
            temperature: float = 0.0,
            max_tokens: int = 512,
            seed: Optional[int] = None,
    ) -> Any:
        """One chat-completions request. Returns the SDK response object."""
        if not messages:
            raise ValueError("messages must be non-empty.")

        params: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if seed is not None:
            params["seed"] = seed

        self.logger.debug(
            "Chat request: model=%s messages=%d temp=%s max_tokens=%s",
            self.model, len(messages), temperature, max_tokens
        )

        try:
            return self.client.chat.completions.create(**params)
        except openai.OpenAIError as e:
            self.logger.error("Chat request failed: %s", e)
            raise ChatProviderError(f"Chat request failed: {e}") from e

    def answer(self, prompt: str, *, system_text: Optional[str] = None, **kwargs: Any) -> Dict[str, Any]:
        """
        Ask a single question (optionally under a system prompt).
        Returns {"answer", "model", "usage"}.
        """
        messages: List[Message] = []
        if system_text:
            messages.append({"role": "system", "content": system_text})
        messages.append({"role": "user", "content": prompt})

        resp = self.complete(messages, **kwargs)

        try:
            content = resp.choices[0].message.content or ""
        except (AttributeError, IndexError) as e:
            self.logger.error("Unexpected chat response format: %s", e, exc_info=True)
            raise ChatProviderError(f"Unexpected chat response format: {e}") from e

        usage = getattr(resp, "usage", None)
        self.logger.info("Chat answer generated (model=%s, chars=%d)", getattr(resp, "model", None), len(content))
        self.logger.debug("Token usage: %r", usage)

        return {
            "answer": content,
            "model": getattr(resp, "model", None),
            "usage": usage,
        }
