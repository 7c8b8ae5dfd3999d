"""
Display data of users, in two phases:
  1. `await preload_many(ids)` fetches whatever is not cached yet,
  2. `sync(id)` reads the cache without any I/O.
"""

import asyncio
import logging
from typing import Callable, Iterable, Optional

from src.core.models import LightUser, UserId
from src.db.repository import UserRepository

logger = logging.getLogger(__name__)

LightUserGetterSync = Callable[[UserId], Optional[LightUser]]


class LightUserApi:
    def __init__(self, repository: UserRepository) -> None:
        self.repo = repository
        self._cache: dict[UserId, LightUser] = {}

    async def preload_many(self, user_ids: Iterable[UserId]) -> None:
        missing = sorted({uid for uid in user_ids if uid not in self._cache})
        if not missing:
            return
        users = await asyncio.to_thread(self.repo.get_light_users, missing)
        for user in users:
            self._cache[user.id] = user
        if len(users) < len(missing):
            logger.debug("Unknown user ids: %s", set(missing) - {u.id for u in users})

    def sync(self, user_id: UserId) -> Optional[LightUser]:
        """Cached user, or None if it was never preloaded (or does not exist)."""
        return self._cache.get(user_id)
