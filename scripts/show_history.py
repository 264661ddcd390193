"""Print a user's stored analyses, newest first.

Usage: python scripts/show_history.py <uid> [limit]
"""
import sys

from app.core.firebase import get_db
from app.services.health_store import HealthStore


def show_history(uid: str, limit: int = 10):
    store = HealthStore(get_db())
    items = store.list_history(uid, limit)

    print(f"\n========= HEALTH HISTORY: {uid} =========")
    if not items:
        print("(No analyses stored for this user)")
    for item in items:
        print(
            f"- {item['createdAt']}  score={item.get('longevityScore')}  "
            f"healthAge={item.get('healthAge', 'N/A')}  id={item['id']}"
        )
        for area in item.get("focusAreas") or []:
            print(f"    * {area}")
    print("=========================================")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        sys.exit(__doc__)
    show_history(sys.argv[1], int(sys.argv[2]) if len(sys.argv) > 2 else 10)
