# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-09
# Description: DocChatService.py
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from chat.OpenAIChat import OpenAIChat
from ranking.ScoredRecord import NoRelevantResults
from services.DocQueryService import DocQueryService
from utility.logging_utils import get_class_logger

NO_RELEVANT_ANSWER = "I could not find anything relevant to this question in the uploaded documents."


def build_prompt(context: str, question: str) -> str:
    return f"Documents:\n{context}\n*Question:* {question}"


@dataclass
class DocChatService:
    """
    Chat Service:
        - retrieves relevant segments using DocQueryService
        - builds a documents + question prompt
        - calls OpenAIChat to generate the answer
        - returns answer + sources
    """
    query_service: DocQueryService
    chat_client: OpenAIChat
    default_temperature: float = 0.5
    default_max_tokens: int = 512
    logger: logging.Logger | None = None

    system_prompt: str = (
        "You answer questions about the user's uploaded documents.\n"
        "Use ONLY the provided documents. If they do not contain the answer, say so.\n"
    )

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def ask(
            self,
            *,
            question: str,
            n_results: Optional[int] = None,
            temperature: Optional[float] = None,
            max_tokens: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
            Returns:
            {
                "question": str,
                "answer": str,
                "sources": [ {record_id, source_id, score, text, created_at}, ... ],
                "no_relevant_results": bool,
                "model": str|None,
                "usage": Any|None,
            }
        """
        q = (question or "").strip()
        if not q:
            raise ValueError("question must not be empty")

        self.logger.info("ask: question='%s' n_results=%s (start)", q[:120], n_results)

        result = self.query_service.retrieve(q, n_results)
        if isinstance(result, NoRelevantResults):
            self.logger.info("ask: no relevant results (%s); model not called", result.reason)
            return {
                "question": q,
                "answer": NO_RELEVANT_ANSWER,
                "sources": [],
                "no_relevant_results": True,
                "model": None,
                "usage": None,
            }

        context = self.query_service.build_context(result)
        self.logger.debug("ask: context_chars=%d", len(context))

        temp = self.default_temperature if temperature is None else temperature
        mtok = self.default_max_tokens if max_tokens is None else max_tokens

        out = self.chat_client.answer(
            build_prompt(context, q),
            system_text=self.system_prompt,
            temperature=temp,
            max_tokens=mtok,
        )

        self.logger.info("ask: answer_chars=%d sources=%d (done)", len(out["answer"]), len(result))

        return {
            "question": q,
            "answer": out["answer"],
            "sources": self.query_service.to_hits(result),
            "no_relevant_results": False,
            "model": out.get("model"),
            "usage": out.get("usage"),
        }
