"""Per-user reader session: landing page, appearance and navigation."""

import logging
from typing import Optional

from catalog.store import Catalog
from config.settings import Settings
from navigation.callbacks import HistoryListener, LoggingListener
from navigation.machine import Navigator

logger = logging.getLogger(__name__)


class ReaderSession:
    """One browsing session over an already-built catalog."""

    def __init__(self, catalog: Catalog, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.catalog = catalog
        self.history = HistoryListener()
        self.navigator = Navigator(
            catalog,
            default_section=self.settings.default_section,
            listeners=[LoggingListener(), self.history],
            settings=self.settings,
        )
        self.in_library = False
        self.dark_mode = self.settings.dark_mode

    @property
    def layout(self) -> str:
        return self.settings.layout

    @property
    def state(self):
        return self.navigator.state

    def enter_library(self) -> None:
        """Leave the landing page; idempotent."""
        if not self.in_library:
            self.in_library = True
            logger.info("Entered library (layout=%s)", self.layout)

    def toggle_dark_mode(self) -> bool:
        self.dark_mode = not self.dark_mode
        logger.debug("Dark mode: %s", self.dark_mode)
        return self.dark_mode
