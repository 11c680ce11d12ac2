"""
Settings API Route

Target split, deviation threshold and theme of the caller. Every response
carries the target summary so the UI can show remaining/overage points.
"""

from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel, Field

from app.dependencies import get_settings_store, get_user_id
from calibration.targets import TargetSummary, summarize_targets
from store.settings_store import SettingsStore, SettingsUpdate, UserSettings


router = APIRouter(prefix="/settings", tags=["settings"])


class SettingsResponse(UserSettings):
    targets: TargetSummary

    @classmethod
    def from_settings(cls, settings: UserSettings) -> "SettingsResponse":
        return cls(
            **settings.model_dump(),
            targets=summarize_targets(settings.target_percentages),
        )


class TargetUpdate(BaseModel):
    percentage: float = Field(..., description="New target for this rating, in percent")


@router.get("", response_model=SettingsResponse)
def get_settings(
    user_id: str = Depends(get_user_id),
    store: SettingsStore = Depends(get_settings_store),
) -> SettingsResponse:
    return SettingsResponse.from_settings(store.get(user_id))


@router.put("", response_model=SettingsResponse)
def update_settings(
    update: SettingsUpdate,
    user_id: str = Depends(get_user_id),
    store: SettingsStore = Depends(get_settings_store),
) -> SettingsResponse:
    return SettingsResponse.from_settings(store.update(user_id, update))


@router.put("/targets/{rating}", response_model=SettingsResponse)
def set_target(
    update: TargetUpdate,
    rating: int = Path(..., ge=1, le=5),
    user_id: str = Depends(get_user_id),
    store: SettingsStore = Depends(get_settings_store),
) -> SettingsResponse:
    """Replace one rating's target. The others are not rebalanced."""
    return SettingsResponse.from_settings(
        store.set_target_percentage(user_id, rating, update.percentage)
    )


@router.post("/reset", response_model=SettingsResponse)
def reset_settings(
    user_id: str = Depends(get_user_id),
    store: SettingsStore = Depends(get_settings_store),
) -> SettingsResponse:
    return SettingsResponse.from_settings(store.reset(user_id))
