import uuid
from typing import Optional

from fastapi.testclient import TestClient

from gotogether.services.identity_service import create_identity_token


def unique_uid(prefix: str = 'uid') -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def create_user(client: TestClient, firebase_uid: Optional[str] = None, display_name: str = 'Test User', email: Optional[str] = None):
    if firebase_uid is None:
        firebase_uid = unique_uid()
    payload = {
        'firebaseUid': firebase_uid,
        'displayName': display_name,
        'email': email or f"{firebase_uid}@example.com",
    }
    r = client.post('/api/users', json=payload)
    return r


def auth_headers(uid: str, **claims) -> dict:
    return {"Authorization": f"Bearer {create_identity_token(uid, **claims)}"}
