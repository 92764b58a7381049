from fastapi import APIRouter
from gotogether.api import users
from gotogether.api import categories
from gotogether.api import contacts
from gotogether.api import interests
from gotogether.api import hangouts

router = APIRouter()


# Categories come before contacts: /contacts/{user_id}/categories must
# not be matched as /contacts/{user_id}/{contact_id}
router.include_router(users.router, tags=["users"])
router.include_router(categories.router, tags=["categories"])
router.include_router(contacts.router, tags=["contacts"])
router.include_router(interests.router, tags=["interests"])
router.include_router(hangouts.router, tags=["hangouts"])
