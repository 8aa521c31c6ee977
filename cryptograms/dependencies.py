from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cryptograms.core.config import Settings, get_settings
from cryptograms.db.session import get_db_session
from cryptograms.services.corpus.quotes import QuoteCorpus, shared_quote_corpus
from cryptograms.services.corpus.words import WordCorpus, shared_word_corpus
from cryptograms.services.cryptogram import CryptogramService
from cryptograms.services.dispatch import CipherDispatcher


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Database session dependency
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    async with get_db_session() as session:
        yield session

DbSessionDep = Annotated[AsyncSession, Depends(get_db)]


def get_word_corpus(settings: SettingsDep) -> WordCorpus:
    """Get the shared word corpus."""
    return shared_word_corpus(settings)


def get_quote_corpus(settings: SettingsDep) -> QuoteCorpus:
    """Get the shared quote corpus."""
    return shared_quote_corpus(settings)


WordCorpusDep = Annotated[WordCorpus, Depends(get_word_corpus)]
QuoteCorpusDep = Annotated[QuoteCorpus, Depends(get_quote_corpus)]


def get_dispatcher(settings: SettingsDep, words: WordCorpusDep) -> CipherDispatcher:
    """Fresh dispatcher, and random source, per request."""
    return CipherDispatcher(words=words, settings=settings)


DispatcherDep = Annotated[CipherDispatcher, Depends(get_dispatcher)]


def get_cryptogram_service(
    dispatcher: DispatcherDep,
    quotes: QuoteCorpusDep,
    db: DbSessionDep,
) -> CryptogramService:
    return CryptogramService(dispatcher, quotes, db)


CryptogramServiceDep = Annotated[CryptogramService, Depends(get_cryptogram_service)]
