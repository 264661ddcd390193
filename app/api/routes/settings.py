"""Notification and privacy preferences for the signed-in user."""
from fastapi import APIRouter, Body, Depends

from app.api.deps import AuthUser, get_current_user
from app.models.settings import (
    NotificationPreferences,
    NotificationPreferencesUpdate,
    PrivacyPreferences,
    PrivacyPreferencesUpdate,
)
from app.services.settings_store import SettingsStore, get_settings_store

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/notifications", response_model=NotificationPreferences)
def get_notifications(
    user: AuthUser = Depends(get_current_user),
    store: SettingsStore = Depends(get_settings_store),
):
    return store.get_notifications(user.uid)


@router.put("/notifications", response_model=NotificationPreferences)
def update_notifications(
    payload: NotificationPreferencesUpdate = Body(...),
    user: AuthUser = Depends(get_current_user),
    store: SettingsStore = Depends(get_settings_store),
):
    """Only the fields sent are changed."""
    return store.update_notifications(user.uid, payload.model_dump(exclude_none=True))


@router.get("/privacy", response_model=PrivacyPreferences)
def get_privacy(
    user: AuthUser = Depends(get_current_user),
    store: SettingsStore = Depends(get_settings_store),
):
    return store.get_privacy(user.uid)


@router.put("/privacy", response_model=PrivacyPreferences)
def update_privacy(
    payload: PrivacyPreferencesUpdate = Body(...),
    user: AuthUser = Depends(get_current_user),
    store: SettingsStore = Depends(get_settings_store),
):
    return store.update_privacy(user.uid, payload.model_dump(exclude_none=True))
