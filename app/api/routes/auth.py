"""Who-am-I endpoint for the dashboard's account menu and profile page.

Sign-in itself happens on the frontend with Firebase.
"""
from fastapi import APIRouter, Depends

from app.api.deps import AuthUser, get_current_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me")
async def get_me(user: AuthUser = Depends(get_current_user)):
    return {
        "uid": user.uid,
        "email": user.email,
        "emailVerified": user.email_verified,
    }
