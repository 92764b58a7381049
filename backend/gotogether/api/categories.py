"""
Contact Categories API

Mounted before the contacts router so that /contacts/{user_id}/categories
is not captured by /contacts/{user_id}/{contact_id}.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from gotogether.models.database import get_db
from gotogether.services.category_service import category_service
from gotogether.services.exceptions import NotFoundError, ValidationError
from gotogether.schemas.contact import (
    CategoryResponse,
    CreateCategoryRequest,
    UpdateCategoryRequest,
)

router = APIRouter()


@router.get("/contacts/{user_id}/categories", response_model=List[CategoryResponse])
async def list_categories(user_id: str, db: AsyncSession = Depends(get_db)):
    return await category_service.list_for_user(db, user_id)


@router.post("/contacts/{user_id}/categories", response_model=CategoryResponse, status_code=201)
async def create_category(
    user_id: str,
    req: CreateCategoryRequest,
    db: AsyncSession = Depends(get_db),
):
    try:
        return await category_service.create(db, user_id, req.name, req.color)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/contacts/{user_id}/categories/{category_id}", response_model=CategoryResponse)
async def update_category(
    user_id: str,
    category_id: str,
    req: UpdateCategoryRequest,
    db: AsyncSession = Depends(get_db),
):
    try:
        return await category_service.update(
            db, user_id, category_id, **req.model_dump(exclude_unset=True)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/contacts/{user_id}/categories/{category_id}", status_code=204)
async def delete_category(
    user_id: str,
    category_id: str,
    db: AsyncSession = Depends(get_db),
):
    try:
        await category_service.delete(db, user_id, category_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
