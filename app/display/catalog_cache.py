"""
Local catalog cache for display clients.

The cache is a repository over an injected persistence adapter. It starts
from whatever the adapter last persisted; `hydrate()` then fetches custom
items and generated images from the server, merges them with the seed
catalog and persists the result. Until hydration finishes `is_ready` is
False.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Sequence

from app.display.menu_client import MenuClient, MenuClientError
from app.schemas import CatalogItem, DailyMenuPayload, DisplayMenu
from app.seed_catalog import SEED_ITEMS
from app.services.catalog_service import merge_catalog
from app.services.menu_service import build_display_menu

logger = logging.getLogger(__name__)


class CatalogStore(Protocol):
    def load(self) -> dict: ...

    def save(self, state: dict) -> None: ...


class InMemoryCatalogStore:
    def __init__(self, state: Optional[dict] = None):
        self.state = dict(state or {})

    def load(self) -> dict:
        return dict(self.state)

    def save(self, state: dict) -> None:
        self.state = dict(state)


class JsonFileCatalogStore:
    """Persists the cache as a JSON document; a missing or corrupt file is an empty cache."""

    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable catalog cache %s: %s", self.path, e)
            return {}

    def save(self, state: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(state, indent=2), encoding="utf-8")
        tmp.replace(self.path)


def _items_from_state(state: dict, key: str) -> List[CatalogItem]:
    return [CatalogItem.model_validate(item) for item in state.get(key, [])]


class CatalogRepository:
    """Merged catalog held by a display client."""

    def __init__(
        self,
        store: CatalogStore,
        client: MenuClient,
        seed_items: Sequence[CatalogItem] = SEED_ITEMS,
    ):
        self.store = store
        self.client = client
        self.seed_items = tuple(seed_items)
        self.is_ready = False

        state = store.load()
        self._local_items: List[CatalogItem] = _items_from_state(state, "localItems")
        cached = _items_from_state(state, "items")
        self._items: List[CatalogItem] = cached or merge_catalog(
            self.seed_items, [], {}, self._local_items
        )

    @property
    def items(self) -> List[CatalogItem]:
        return list(self._items)

    def get(self, item_id: str) -> Optional[CatalogItem]:
        return self.by_id().get(item_id)

    def by_id(self) -> Dict[str, CatalogItem]:
        return {item.id: item for item in self._items}

    def add_local_item(self, item: CatalogItem) -> None:
        """Keep a custom item that has not been saved to the server yet."""
        self._local_items = [i for i in self._local_items if i.id != item.id] + [item]
        self._items = [i for i in self._items if i.id != item.id] + [item]
        self._persist()

    async def hydrate(self) -> bool:
        """
        Refresh from the server. Returns False (keeping the persisted cache)
        when the server cannot be reached; the repository is ready either way.
        """
        try:
            server_items = await self.client.get_custom_items()
            images = await self.client.get_generated_images()
        except MenuClientError as e:
            logger.warning("Catalog hydration failed, using cached catalog: %s", e)
            self.is_ready = True
            return False

        server_ids = {item.id for item in server_items}
        self._local_items = [i for i in self._local_items if i.id not in server_ids]
        self._items = merge_catalog(self.seed_items, server_items, images, self._local_items)
        self._persist()
        self.is_ready = True
        logger.info(
            "Catalog hydrated: %d items (%d custom, %d generated images)",
            len(self._items),
            len(server_items),
            len(images),
        )
        return True

    def resolve_menu(self, payload: DailyMenuPayload) -> DisplayMenu:
        return build_display_menu(payload, self.by_id())

    def _persist(self) -> None:
        self.store.save(
            {
                "items": [item.model_dump(by_alias=True) for item in self._items],
                "localItems": [item.model_dump(by_alias=True) for item in self._local_items],
            }
        )
