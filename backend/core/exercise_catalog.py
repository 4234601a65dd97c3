"""
Exercise template cache and name resolution.

The full exercise template catalog is fetched once per cache instance by
exhaustive pagination and then served from memory:
- id -> display name lookup (falls back to the id itself)
- case-insensitive substring search over display names, in catalog order
"""
import asyncio
import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

from application.ports import HevyGateway
from backend.core.constants import FIRST_PAGE, TEMPLATES_PAGE_SIZE
from domain.models import ExerciseTemplate

logger = logging.getLogger(__name__)


class CacheState(str, Enum):
    """Lifecycle state of the template cache."""

    UNLOADED = "unloaded"
    LOADED = "loaded"


class ExerciseTemplateCache:
    """
    Lazily loaded, read-only snapshot of the exercise template catalog.

    Owned by a client/session context and shared by the services that need
    exercise names. The catalog is either absent (UNLOADED) or complete
    (LOADED); a failed load leaves the cache UNLOADED so the next caller
    retries. Concurrent first loads are coalesced into a single fetch
    sequence.
    """

    def __init__(
        self,
        gateway: HevyGateway,
        *,
        page_size: int = TEMPLATES_PAGE_SIZE,
    ):
        """
        Initialize an empty cache.

        Args:
            gateway: Remote data gateway used to fetch template pages
            page_size: Templates per page (the service maximum)
        """
        self._gateway = gateway
        self._page_size = page_size
        self._state = CacheState.UNLOADED
        self._templates: Tuple[ExerciseTemplate, ...] = ()
        self._by_id: Dict[str, ExerciseTemplate] = {}
        self._lock = asyncio.Lock()

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return self._state is CacheState.LOADED

    @property
    def templates(self) -> Tuple[ExerciseTemplate, ...]:
        return self._templates

    async def ensure_loaded(self) -> None:
        """
        Load the full catalog if it has not been loaded yet.

        Idempotent once loaded. Fetch errors propagate unchanged and leave
        the cache empty.
        """
        if self.is_loaded:
            return

        async with self._lock:
            if self.is_loaded:
                return

            templates = await self._fetch_all()
            self._templates = tuple(templates)
            self._by_id = {t.id: t for t in templates}
            self._state = CacheState.LOADED
            logger.info(f"Loaded {len(templates)} exercise templates")

    async def _fetch_all(self) -> List[ExerciseTemplate]:
        """Fetch template pages until a short page marks the end of the catalog."""
        collected: List[ExerciseTemplate] = []
        seen: set = set()
        page = FIRST_PAGE

        while True:
            batch = await self._gateway.get_exercise_templates(
                page=page,
                page_size=self._page_size,
            )
            for template in batch:
                if template.id not in seen:
                    seen.add(template.id)
                    collected.append(template)

            if len(batch) < self._page_size:
                return collected
            page += 1

    def invalidate(self) -> None:
        """Drop the snapshot; the next ensure_loaded() fetches it again."""
        self._templates = ()
        self._by_id = {}
        self._state = CacheState.UNLOADED

    def name_of(self, template_id: str) -> str:
        """Display name for a template id, or the id itself if unknown."""
        template = self._by_id.get(template_id)
        return template.title if template else template_id

    def name_map(self) -> Dict[str, str]:
        """Copy of the id -> display name mapping."""
        return {t.id: t.title for t in self._templates}

    def get(self, template_id: str) -> Optional[ExerciseTemplate]:
        return self._by_id.get(template_id)

    def matching(self, query: str) -> List[ExerciseTemplate]:
        """Templates whose title contains ``query`` (case-insensitive), in catalog order."""
        return [t for t in self._templates if t.matches(query)]

    async def search(self, query: str) -> List[ExerciseTemplate]:
        """
        Search the catalog by display name.

        Loads the catalog first if needed, so an empty query both warms the
        cache and returns the whole catalog.

        Args:
            query: Case-insensitive substring to look for

        Returns:
            Matching templates in catalog order (empty list if none match)
        """
        await self.ensure_loaded()
        return self.matching(query)

    async def resolve_exercise_name(self, template_id: str) -> str:
        """Display name for a template id, loading the catalog if needed."""
        await self.ensure_loaded()
        return self.name_of(template_id)
