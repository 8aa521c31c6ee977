import logging
import random
import secrets

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cryptograms.core.exceptions import CryptogramNotFoundError
from cryptograms.models.database import Cryptogram
from cryptograms.models.schemas import (
    AnswerResponse,
    CipherRequest,
    CipherType,
    CryptogramResponse,
    Length,
)
from cryptograms.services.corpus.quotes import Quote, QuoteCorpus
from cryptograms.services.dispatch import CipherDispatcher

logger = logging.getLogger(__name__)


class CryptogramService:
    """
    Creates cryptograms and hands back their answers.

    A cryptogram is a quote (or caller supplied plaintext) encrypted with the
    requested cipher. Its plaintext and key are stored under a random token
    so the answer can be fetched later.
    """

    def __init__(
        self,
        dispatcher: CipherDispatcher,
        quotes: QuoteCorpus,
        session: AsyncSession,
        rng: random.Random | None = None,
    ):
        self.dispatcher = dispatcher
        self.quotes = quotes
        self.session = session
        self.rng = rng if rng is not None else random.Random()

    async def create(
        self,
        plaintext: str | None = None,
        length: Length = Length.MEDIUM,
        cipher_type: CipherType = CipherType.IDENTITY,
        key: str | None = None,
    ) -> CryptogramResponse:
        """
        Encrypt plaintext, or a quote of the given length, and store the answer.

        A cryptarithm is built from the word corpus alone, so no quote is
        drawn for it and the puzzle itself is stored as the plaintext.

        Encryption runs in the threadpool since the cryptarithm search can
        take a while.
        """
        if cipher_type is CipherType.CRYPTARITHM:
            quote = Quote(text=plaintext or "")
        elif plaintext is None:
            quote = self.quotes.fetch(length, self.rng)
        else:
            quote = Quote(text=plaintext)

        request = CipherRequest(plaintext=quote.text, cipher_type=cipher_type, key=key)
        result = await run_in_threadpool(self.dispatcher.encrypt, request)

        if cipher_type is CipherType.CRYPTARITHM:
            quote = Quote(text=result.ciphertext)

        token = secrets.token_urlsafe(16)
        self.session.add(
            Cryptogram(
                token=token,
                cipher_type=cipher_type.value,
                plaintext=quote.text,
                key=result.key,
                author=quote.author,
            )
        )
        await self.session.flush()

        logger.info("Created %s cryptogram %s", cipher_type.value, token)

        return CryptogramResponse(
            ciphertext=result.ciphertext,
            cipher_type=cipher_type,
            length=length,
            author=quote.author,
            token=token,
        )

    async def answer(self, token: str) -> AnswerResponse:
        """
        Look up the plaintext and key stored under token.

        Raises:
            CryptogramNotFoundError: if no cryptogram has this token
        """
        result = await self.session.execute(
            select(Cryptogram).where(Cryptogram.token == token)
        )
        cryptogram = result.scalar_one_or_none()

        if cryptogram is None:
            raise CryptogramNotFoundError(token)

        return AnswerResponse.model_validate(cryptogram)
