"""
Settings Store

Per-user calibration settings: target split, deviation threshold and theme.

Invalid target splits are stored as given; validity is reported, not enforced.
"""

import logging
from threading import Lock
from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field

from calibration.targets import update_target_percentage
from schemas.rating import DEVIATION_THRESHOLD, PercentageSplit, default_percentages
from store.errors import EmptyUpdateError


logger = logging.getLogger(__name__)

Theme = Literal["light", "dark"]


class UserSettings(BaseModel):
    """Calibration settings of one user."""
    target_percentages: PercentageSplit = Field(default_factory=default_percentages)
    deviation_threshold: float = Field(default=DEVIATION_THRESHOLD, ge=0)
    theme: Theme = "light"


class SettingsUpdate(BaseModel):
    """Partial settings update; unset fields are left alone."""
    target_percentages: Optional[PercentageSplit] = None
    deviation_threshold: Optional[float] = Field(default=None, ge=0)
    theme: Optional[Theme] = None

    def changes(self) -> dict:
        return {
            key: getattr(self, key)
            for key in self.model_fields_set
            if getattr(self, key) is not None
        }


class SettingsStore:
    """
    In-memory settings keyed by user_id.

    Users without stored settings read the defaults.
    """

    def __init__(self, default_threshold: float = DEVIATION_THRESHOLD):
        self._settings: Dict[str, UserSettings] = {}
        self._default_threshold = default_threshold
        self._lock = Lock()

    def _defaults(self) -> UserSettings:
        return UserSettings(deviation_threshold=self._default_threshold)

    def get(self, user_id: str) -> UserSettings:
        with self._lock:
            return self._settings.get(user_id, self._defaults()).model_copy(deep=True)

    def put(self, user_id: str, settings: UserSettings) -> UserSettings:
        with self._lock:
            self._settings[user_id] = settings.model_copy(deep=True)
        return settings.model_copy(deep=True)

    def update(self, user_id: str, update: SettingsUpdate) -> UserSettings:
        """
        Apply a partial update.

        Raises:
            EmptyUpdateError: update sets nothing
        """
        changes = update.changes()
        if not changes:
            raise EmptyUpdateError()

        with self._lock:
            current = self._settings.get(user_id, self._defaults())
            updated = current.model_copy(update=changes, deep=True)
            self._settings[user_id] = updated
        logger.info(f"[{user_id}] Settings updated: {sorted(changes)}")
        return updated.model_copy(deep=True)

    def set_target_percentage(self, user_id: str, rating: int, percentage: float) -> UserSettings:
        """Replace one rating's target; the other four are left untouched."""
        with self._lock:
            current = self._settings.get(user_id, self._defaults())
            targets = update_target_percentage(current.target_percentages, rating, percentage)
            updated = current.model_copy(update={"target_percentages": targets}, deep=True)
            self._settings[user_id] = updated
        return updated.model_copy(deep=True)

    def reset(self, user_id: str) -> UserSettings:
        """Targets and threshold back to defaults; theme is kept."""
        with self._lock:
            current = self._settings.get(user_id, self._defaults())
            updated = self._defaults().model_copy(update={"theme": current.theme})
            self._settings[user_id] = updated
        logger.info(f"[{user_id}] Settings reset to defaults")
        return updated.model_copy(deep=True)
