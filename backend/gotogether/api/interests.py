"""
Interests API - Interest tags and user selections
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from gotogether.models.database import get_db
from gotogether.services.exceptions import ConflictError, NotFoundError, ValidationError
from gotogether.services.interest_service import interest_service
from gotogether.schemas.interest import (
    AddUserInterestRequest,
    CreateInterestRequest,
    InterestResponse,
    UpdateInterestRequest,
    UserInterestResponse,
)

router = APIRouter()


@router.get("/interests", response_model=List[InterestResponse])
async def list_interests(db: AsyncSession = Depends(get_db)):
    return await interest_service.list_interests(db)


@router.post("/interests", response_model=InterestResponse, status_code=201)
async def create_interest(req: CreateInterestRequest, db: AsyncSession = Depends(get_db)):
    try:
        return await interest_service.create(db, req.name, req.description)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/interests/{interest_id}", response_model=InterestResponse)
async def update_interest(interest_id: str, req: UpdateInterestRequest, db: AsyncSession = Depends(get_db)):
    try:
        return await interest_service.update(db, interest_id, **req.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/interests/{interest_id}", status_code=204)
async def delete_interest(interest_id: str, db: AsyncSession = Depends(get_db)):
    try:
        await interest_service.delete(db, interest_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/interests/user/{user_id}", response_model=List[UserInterestResponse])
async def list_user_interests(user_id: str, db: AsyncSession = Depends(get_db)):
    return await interest_service.list_user_interests(db, user_id)


@router.post("/interests/user/{user_id}", response_model=UserInterestResponse, status_code=201)
async def add_user_interest(user_id: str, req: AddUserInterestRequest, db: AsyncSession = Depends(get_db)):
    try:
        return await interest_service.add_user_interest(db, user_id, req.interest_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/interests/user/{user_id}/{interest_id}", status_code=204)
async def remove_user_interest(user_id: str, interest_id: str, db: AsyncSession = Depends(get_db)):
    try:
        await interest_service.remove_user_interest(db, user_id, interest_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
