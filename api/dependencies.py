# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-10
# Description: dependencies.py
# -----------------------------------------------------------------------------
from api.AppContainer import get_app_container
from embedding.EmbeddingCache import EmbeddingCache
from services.DocChatService import DocChatService
from services.DocIngestService import DocIngestService
from services.DocQueryService import DocQueryService
from vectorstore.DocVectorStore import DocVectorStore


def get_ingest_service() -> DocIngestService:
    # use the singleton service from the container
    return get_app_container().ingest_service


def get_query_service() -> DocQueryService:
    # use the singleton service from the container
    return get_app_container().query_service


def get_chat_service() -> DocChatService:
    # use the singleton service from the container
    return get_app_container().chat_service


def get_vector_store() -> DocVectorStore:
    return get_app_container().store


def get_embedding_cache() -> EmbeddingCache:
    return get_app_container().embedding_cache
