"""User notification and privacy preferences."""
from typing import Optional

from app.models.health_data import CamelModel


class NotificationPreferences(CamelModel):
    email_updates: bool = True
    weekly_reports: bool = True
    health_tips: bool = True
    study_alerts: bool = False
    marketing_emails: bool = False


class NotificationPreferencesUpdate(CamelModel):
    email_updates: Optional[bool] = None
    weekly_reports: Optional[bool] = None
    health_tips: Optional[bool] = None
    study_alerts: Optional[bool] = None
    marketing_emails: Optional[bool] = None


class PrivacyPreferences(CamelModel):
    data_sharing: bool = False
    anonymous_analytics: bool = True
    research_participation: bool = False
    third_party_access: bool = False


class PrivacyPreferencesUpdate(CamelModel):
    data_sharing: Optional[bool] = None
    anonymous_analytics: Optional[bool] = None
    research_participation: Optional[bool] = None
    third_party_access: Optional[bool] = None
