"""
University Catalog Service

Time-boxed memoization of the full university catalog, which the matching
endpoint scores on every request. The catalog changes rarely, so one snapshot
is reused until it expires or the catalog version is bumped.

Scoring itself never caches; this sits in front of the repository only.

Nothing in the API writes to the universities table, so the snapshot normally
expires by TTL alone. Whatever process updates the catalog (an import job or an
admin tool sharing this process) calls ``invalidate()`` to force the next read
to reload.
"""

import asyncio
import logging
import time
from typing import Any, Callable, Dict, List, Optional

from app.infrastructure.db.repositories.university_repository import UniversityRepository


logger = logging.getLogger(__name__)


class UniversityCatalogService:
    """
    Cache-first catalog access.

    A snapshot is valid while it is younger than ttl_seconds and was loaded
    under the current version. ttl_seconds=0 disables caching.
    """

    def __init__(
        self,
        repository: UniversityRepository,
        ttl_seconds: int = 300,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._repository = repository
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._version = 0
        self._snapshot: Optional[List[Dict[str, Any]]] = None
        self._snapshot_version = -1
        self._loaded_at = 0.0
        self._lock = asyncio.Lock()

    @property
    def version(self) -> int:
        return self._version

    async def get_catalog(self) -> List[Dict[str, Any]]:
        """Return the catalog, reloading it when stale."""
        if self._is_fresh():
            logger.debug(f"[CATALOG] Cache hit (version {self._version})")
            return list(self._snapshot)

        async with self._lock:
            # Another request may have refreshed while we waited
            if self._is_fresh():
                return list(self._snapshot)

            version = self._version
            rows = await self._repository.get_all()
            # A load that raced with invalidate() is returned but not kept
            if self._ttl_seconds > 0 and version == self._version:
                self._snapshot = rows
                self._snapshot_version = version
                self._loaded_at = self._clock()
            logger.info(f"[CATALOG] Loaded {len(rows)} universities (version {version})")
            return list(rows)

    def invalidate(self) -> None:
        """Bump the catalog version so the next read reloads."""
        self._version += 1
        self._snapshot = None
        logger.info(f"[CATALOG] Invalidated, now version {self._version}")

    def _is_fresh(self) -> bool:
        if self._snapshot is None or self._ttl_seconds <= 0:
            return False
        if self._snapshot_version != self._version:
            return False
        return (self._clock() - self._loaded_at) < self._ttl_seconds
