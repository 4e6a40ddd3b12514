from fastapi import APIRouter
from muro.api.v0.account.main import router as account_router
from muro.api.v0.story.main import router as story_router
from muro.api.v0.post.main import router as post_router
from muro.api.v0.comment.main import router as comment_router
from muro.api.uploads import router as uploads_router

router = APIRouter()
router.include_router(account_router)
router.include_router(story_router)
router.include_router(post_router)
router.include_router(comment_router)
router.include_router(uploads_router)
