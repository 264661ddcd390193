"""
Firebase admin initialization and helpers.

The frontend authenticates users with Firebase Authentication and sends
the Firebase ID token to the backend. The backend verifies those tokens
with the Firebase Admin SDK and stores health analyses in Firestore.
"""

import logging
import os

import firebase_admin
from firebase_admin import credentials, firestore

from app.core.config import settings

logger = logging.getLogger(__name__)

# Global reference to avoid re-initialization
db = None


def init_firebase():
    """
    Initialize Firebase Admin SDK if not already initialized.

    Reads the service account path from FIREBASE_CREDENTIALS.
    """
    global db

    # Prevent re-initialization (important for Uvicorn reload)
    if firebase_admin._apps:
        return

    cred_path = settings.FIREBASE_CREDENTIALS
    if not os.path.exists(cred_path):
        raise RuntimeError(
            f"Firebase credentials not found at: {cred_path}\n"
            "Set FIREBASE_CREDENTIALS env var or place firebase_key.json correctly."
        )

    cred = credentials.Certificate(cred_path)
    firebase_admin.initialize_app(cred)

    db = firestore.client()
    logger.info("Firebase Admin initialized")


def get_db():
    """Return the Firestore client, initializing Firebase on first use."""
    global db
    if db is None:
        init_firebase()
        if db is None:
            db = firestore.client()
    return db
