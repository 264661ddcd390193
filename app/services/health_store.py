"""Health analysis persistence.

Each analysis is one document in the `health_data` collection:
  health_data/{record_id} = {userId, data, analyzed, longevityScore,
                             healthAge, focusAreas, insights, createdAt}
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from firebase_admin import firestore

from app.core.config import settings
from app.core.firebase import get_db
from app.models.health_data import AnalysisResponse, HealthProfile

MAX_HISTORY_LIMIT = 100


def _to_iso(ts):
    if ts is None:
        return None
    # Firestore Timestamp has .datetime in firebase_admin
    try:
        dt = ts.datetime
    except AttributeError:
        dt = ts
    if isinstance(dt, datetime):
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc).isoformat()
    return str(ts)


def _serialize(doc) -> Dict[str, Any]:
    data = doc.to_dict() or {}
    data["createdAt"] = _to_iso(data.get("createdAt"))
    return {"id": doc.id, **data}


def _score_change(current: Dict[str, Any], previous: Optional[Dict[str, Any]]):
    if previous is None:
        return None
    now, before = current.get("longevityScore"), previous.get("longevityScore")
    if now is None or before is None:
        return None
    return now - before


class HealthStore:
    def __init__(self, db, collection: Optional[str] = None):
        self.db = db
        self.collection = collection or settings.HEALTH_DATA_COLLECTION

    def _coll(self):
        return self.db.collection(self.collection)

    def save_analysis(
        self, user_id: str, profile: HealthProfile, analysis: AnalysisResponse
    ) -> str:
        record = {
            "userId": user_id,
            "data": profile.to_document(),
            "analyzed": analysis.analyzed,
            "longevityScore": analysis.longevity_score,
            "healthAge": analysis.health_age,
            "focusAreas": list(analysis.focus_areas),
            "insights": analysis.insights,
            "createdAt": datetime.now(timezone.utc),
        }
        doc_ref = self._coll().document()
        doc_ref.set(record)
        return doc_ref.id

    def list_history(self, user_id: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Newest first. Each item carries `scoreChange`: its longevity score minus
        the next older analysis's, or None for the user's first analysis.
        """
        limit = limit or settings.HISTORY_LIMIT
        limit = max(1, min(limit, MAX_HISTORY_LIMIT))
        # one extra row so the oldest returned item still has a predecessor
        docs = (
            self._coll()
            .where("userId", "==", user_id)
            .order_by("createdAt", direction=firestore.Query.DESCENDING)
            .limit(limit + 1)
            .stream()
        )
        rows = [_serialize(d) for d in docs]

        items = rows[:limit]
        for item, previous in zip(items, rows[1:] + [None]):
            item["scoreChange"] = _score_change(item, previous)
        return items

    def get_latest(self, user_id: str) -> Optional[Dict[str, Any]]:
        items = self.list_history(user_id, limit=1)
        return items[0] if items else None

    def get_record(self, user_id: str, record_id: str) -> Optional[Dict[str, Any]]:
        doc = self._coll().document(record_id).get()
        if not doc.exists:
            return None
        # Users only see their own analyses
        if (doc.to_dict() or {}).get("userId") != user_id:
            return None
        return _serialize(doc)

    def delete_record(self, user_id: str, record_id: str) -> bool:
        if self.get_record(user_id, record_id) is None:
            return False
        self._coll().document(record_id).delete()
        return True


def get_health_store() -> HealthStore:
    return HealthStore(get_db())
