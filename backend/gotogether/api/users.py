"""
Users API - User records and identity sync

Endpoints for:
- Users CRUD
- Current user lookup and upsert from a verified bearer token
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from gotogether.api.deps import get_current_identity
from gotogether.models.database import get_db
from gotogether.services.exceptions import ConflictError, NotFoundError, ValidationError
from gotogether.services.protocols import IdentityClaims
from gotogether.services.user_service import user_service
from gotogether.schemas.user import CreateUserRequest, UpdateUserRequest, UserResponse

router = APIRouter()


# Identity endpoints are declared before /users/{user_id} so they are not shadowed
@router.get("/users/me", response_model=UserResponse)
async def me(
    identity: IdentityClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    user = await user_service.get_by_firebase_uid(db, identity.uid)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("/users/sync", response_model=UserResponse)
async def sync(
    identity: IdentityClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Create or refresh the user from the token's identity claims."""
    return await user_service.sync_from_identity(db, identity)


@router.get("/users", response_model=List[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    return await user_service.list_users(db)


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)):
    try:
        return await user_service.get_or_fail(db, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/users", response_model=UserResponse, status_code=201)
async def create_user(req: CreateUserRequest, db: AsyncSession = Depends(get_db)):
    try:
        return await user_service.create(
            db,
            firebase_uid=req.firebase_uid,
            email=req.email,
            display_name=req.display_name,
            photo_url=req.photo_url,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(user_id: str, req: UpdateUserRequest, db: AsyncSession = Depends(get_db)):
    try:
        return await user_service.update(db, user_id, **req.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/users/{user_id}", status_code=204)
async def delete_user(user_id: str, db: AsyncSession = Depends(get_db)):
    try:
        await user_service.delete(db, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
