import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from django.conf import settings

from .defaults import default_profile_data
from .reconcile import check_section, merge_profile_data

logger = logging.getLogger(__name__)

SNAPSHOT_KEY = "profileData"


class SnapshotStore:
    """The ProfileData document kept as one JSON file, read and written wholesale.

    The file holds ``{"profileData": {...}}`` so it can be inspected or copied
    between environments by hand.
    """

    def __init__(self, path=None):
        self.path = Path(path or settings.PORTFOLIO_SNAPSHOT_PATH)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Optional[Dict[str, Any]]:
        if not self.path.is_file():
            return None
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Error parsing profile data from %s: %s", self.path, e)
            return None
        data = raw.get(SNAPSHOT_KEY) if isinstance(raw, dict) else None
        if not isinstance(data, dict):
            logger.error("Snapshot %s has no %r document", self.path, SNAPSHOT_KEY)
            return None
        return data

    def get_profile_data(self) -> Dict[str, Any]:
        return merge_profile_data(self.load(), default_profile_data())

    def save(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".snapshot-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({SNAPSHOT_KEY: data}, f, ensure_ascii=False, indent=2, default=str)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
        logger.debug("Snapshot written to %s", self.path)

    def update_section(self, section: str, data: Any) -> Dict[str, Any]:
        check_section(section)
        document = self.load() or default_profile_data()
        document[section] = data
        self.save(document)
        return document

    def clear(self) -> None:
        if self.path.is_file():
            self.path.unlink()
