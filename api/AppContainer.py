# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-10
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from functools import lru_cache

import settings
from chat.OpenAIChat import OpenAIChat
from chunking.DocChunker import DocChunker
from config.Config import Config
from context.ContextAssembler import ContextAssembler
from embedding.DocEmbeddingGateway import DocEmbeddingGateway
from embedding.EmbeddingCache import EmbeddingCache
from embedding.EmbeddingProvider import OpenAIEmbeddingProvider
from extractor.DocTextExtractor import DocTextExtractor
from ranking.SimilarityRanker import SimilarityRanker
from services.DocChatService import DocChatService
from services.DocIngestService import DocIngestService
from services.DocQueryService import DocQueryService
from utility.logging_utils import get_class_logger
from vectorstore.ChromaDocVectorStore import ChromaDocVectorStore
from vectorstore.DocVectorStore import DocVectorStore
from vectorstore.InMemoryDocVectorStore import InMemoryDocVectorStore


class AppContainer:
    """
    Owns heavy object instantiation and application wiring.
    Singleton instances are provided via FastAPI dependencies.
    """

    def __init__(self, cfg: Config | None = None) -> None:
        self.logger = get_class_logger(self.__class__)

        # Configuration
        self.cfg = cfg or Config.from_env()
        self.logger.info("Config: %s", self.cfg.summary())

        # Embedding pipeline
        self.embedding_provider = OpenAIEmbeddingProvider(cfg=self.cfg)
        self.embedding_cache = EmbeddingCache(
            max_entries=settings.EMBED_CACHE_MAX_ENTRIES,
            ttl_seconds=settings.EMBED_CACHE_TTL_SECONDS,
        )
        self.gateway = DocEmbeddingGateway(
            self.embedding_provider,
            cache=self.embedding_cache,
            batch_size=settings.EMBED_BATCH_SIZE,
            max_retry_attempts=settings.EMBED_MAX_RETRY_ATTEMPTS,
            backoff_base_seconds=settings.EMBED_BACKOFF_BASE_SECONDS,
        )

        # Storage
        self.store = self._build_store()

        # Ingestion
        self.extractor = DocTextExtractor()
        self.chunker = DocChunker(max_len=settings.CHUNK_MAX_LEN, overlap=settings.CHUNK_OVERLAP)
        self.ingest_service = DocIngestService(
            extractor=self.extractor,
            chunker=self.chunker,
            gateway=self.gateway,
            store=self.store,
        )

        # Retrieval
        self.query_service = DocQueryService(
            gateway=self.gateway,
            store=self.store,
            ranker=SimilarityRanker(min_score=settings.MIN_RELEVANCE_SCORE),
            assembler=ContextAssembler(max_chars=settings.MAX_CONTEXT_CHARS),
            default_k=settings.DEFAULT_TOP_K,
        )

        # Answering
        self.openai_chat = OpenAIChat(cfg=self.cfg)
        self.chat_service = DocChatService(
            query_service=self.query_service,
            chat_client=self.openai_chat,
            default_temperature=settings.CHAT_TEMPERATURE,
            default_max_tokens=settings.CHAT_MAX_TOKENS,
        )

    def _build_store(self) -> DocVectorStore:
        if settings.VECTOR_BACKEND == "chroma":
            return ChromaDocVectorStore(
                collection_name=settings.VECTOR_COLLECTION,
                persist_path=self.cfg.chroma_path,
            )
        return InMemoryDocVectorStore()


@lru_cache
def get_app_container() -> AppContainer:
    # Built on first use so importing the API does not require credentials
    return AppContainer()
