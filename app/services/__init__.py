"""Scoring, insights and Firestore persistence used by the API routes."""
