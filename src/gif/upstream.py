"""
Classification of the rendering service's answer.

Pending -> Success(stream) when the service answers 200, Pending -> Failure(code) otherwise.
There is no way back to Pending: one request, one result.
"""

import logging
from dataclasses import dataclass
from typing import AsyncIterator

import httpx

from src.core.exceptions import StreamConsumedError, UpstreamStatusError

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_TYPE = "image/gif"


class ByteStream:
    """Body of a successful response, read lazily and only once.

    Either iterate it to the end or call aclose(): both release the connection.
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        self._consumed = False

    @property
    def media_type(self) -> str:
        return self._response.headers.get("content-type", DEFAULT_MEDIA_TYPE)

    @property
    def consumed(self) -> bool:
        return self._consumed

    async def __aiter__(self) -> AsyncIterator[bytes]:
        if self._consumed:
            raise StreamConsumedError("Rendered image stream was already read.")
        self._consumed = True
        try:
            async for chunk in self._response.aiter_bytes():
                yield chunk
        finally:
            await self._response.aclose()

    async def aclose(self) -> None:
        """Discard the stream without reading it."""
        self._consumed = True
        await self._response.aclose()


@dataclass(frozen=True)
class Success:
    stream: ByteStream

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    code: int

    @property
    def ok(self) -> bool:
        return False

    @property
    def error(self) -> UpstreamStatusError:
        return UpstreamStatusError(self.code)


UpstreamResult = Success | Failure


async def upstream_response(name: str, response: httpx.Response) -> UpstreamResult:
    """Hand over the unread body on 200. Anything else is logged and the body is dropped unread."""
    if response.status_code != 200:
        logger.warning("GifExport %s %s", name, response.status_code)
        await response.aclose()
        return Failure(response.status_code)
    return Success(ByteStream(response))
