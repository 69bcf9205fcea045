"""Per-login editing state for the admin menu editor."""

import logging
import threading
from typing import Collection, Dict, Optional

from sqlalchemy.orm import Session

from app.schemas import CatalogItem, EditableMenu
from app.services.menu_service import MenuService

logger = logging.getLogger(__name__)


class MenuEditor:
    """
    Editing session for one admin login.

    Carry-forward from the latest published menu happens at most once per
    date. Switching to another date resets the guard, so clearing every slot
    and reloading the same date does not bring the old menu back.
    """

    def __init__(self):
        self.current_date: Optional[str] = None
        self.carried_forward = False
        self.snapshots: Dict[str, CatalogItem] = {}

    def switch_date(self, date: str) -> None:
        if date != self.current_date:
            self.current_date = date
            self.carried_forward = False

    def load(self, db: Session, date: str) -> EditableMenu:
        self.switch_date(date)
        editable = MenuService.load_editable_menu(
            db,
            date,
            already_carried_forward=self.carried_forward,
            snapshots=self.snapshots,
        )
        if editable.source == "carried_forward":
            self.carried_forward = True
            logger.info("Carried forward latest published menu into %s", date)

        self.snapshots.update(editable.items)
        return editable


class EditorSessionRegistry:
    """In-process map of login session token to MenuEditor."""

    def __init__(self):
        self._editors: Dict[str, MenuEditor] = {}
        self._lock = threading.Lock()

    def get(self, session_token: str) -> MenuEditor:
        with self._lock:
            editor = self._editors.get(session_token)
            if editor is None:
                editor = MenuEditor()
                self._editors[session_token] = editor
            return editor

    def discard(self, session_token: str) -> None:
        with self._lock:
            self._editors.pop(session_token, None)

    def prune(self, active_tokens: Collection[str]) -> int:
        """Drop editors whose login session expired or was revoked."""
        with self._lock:
            stale = [token for token in self._editors if token not in active_tokens]
            for token in stale:
                del self._editors[token]
        if stale:
            logger.info("Pruned %d stale editor session(s)", len(stale))
        return len(stale)

    def __len__(self) -> int:
        return len(self._editors)
