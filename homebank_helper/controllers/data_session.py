# homebank_helper/controllers/data_session.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from homebank_helper.controllers.xhb_loader import load_database
from homebank_helper.data_model import HomeBankDb
from homebank_helper.utilities.core_util import resolve_path

log = logging.getLogger(__name__)


@dataclass
class DataSession:
    """
    Loads and memoizes one database per path.

    Responsibilities:
    • Load the XHB file the first time a path is requested.
    • Hand back the same database while the path stays the same.
    • Reload when a different path is requested, or after ``invalidate``.
    """

    path: Optional[Path] = None
    db: Optional[HomeBankDb] = None

    def load(self, path: Path | str) -> HomeBankDb:
        resolved = resolve_path(path)
        if self.path != resolved or self.db is None:
            log.debug("Cache miss for %s", resolved)
            self.db = load_database(resolved)
            self.path = resolved
        else:
            log.debug(
                "Reusing cached database for %s (%d txns)",
                resolved,
                len(self.db.transactions),
            )
        return self.db

    def invalidate(self) -> None:
        self.path = None
        self.db = None
