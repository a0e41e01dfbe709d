# AsyncCacheConnection – abstract base class
"""
Abstract async cache connection. Concrete connections (Redis today) inherit
from this class and expose a uniform async interface: ensure_connected,
close, ping, get and set.

The handle is opened lazily: nothing touches the network until the first
operation that needs the cache calls `ensure_connected()`.
"""

import abc
import asyncio
from typing import Any, Dict, Optional

from src.cacheprobe.utils.logger import logger


class AsyncCacheConnection(abc.ABC):
    """Base class for a single lazily opened cache session"""

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self._connected: bool = False
        self._client: Any = None
        self._lock = asyncio.Lock()

    @abc.abstractmethod
    async def _open(self) -> Any:
        """Create and verify the underlying client, returning it"""

    @abc.abstractmethod
    async def _close_client(self, client: Any) -> None:
        """Release the underlying client"""

    async def ensure_connected(self) -> Any:
        """Open the connection if it is not already open and return the client.

        Concurrent callers wait on the same lock, so at most one handle is
        ever opened per connection object.
        """
        async with self._lock:
            if not self._connected:
                self._client = await self._open()
                self._connected = True
                logger.info(
                    "Cache connection established",
                    connection=self.__class__.__name__,
                    host=self.config.get("host"),
                    port=self.config.get("port"),
                )
            return self._client

    async def close(self, expected: Any = None) -> bool:
        """Close the connection if open; returns whether anything was closed.

        With `expected`, only that client is closed: a failure on a handle
        that has already been replaced leaves the current one alone.
        """
        async with self._lock:
            if not self._connected:
                return False
            if expected is not None and expected is not self._client:
                return False
            client, self._client = self._client, None
            self._connected = False
            await self._close_client(client)
            logger.info("Cache connection closed", connection=self.__class__.__name__)
            return True

    @property
    def is_open(self) -> bool:
        return self._connected

    @abc.abstractmethod
    async def ping(self) -> str:
        """Round-trip a PING, returning the server reply"""

    @abc.abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Read a key, None when it does not exist"""

    @abc.abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Write a key"""
