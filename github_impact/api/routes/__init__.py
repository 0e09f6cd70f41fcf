from fastapi import APIRouter

from github_impact.api.routes.leaderboard import router as leaderboard_router
from github_impact.api.routes.users import router as users_router

router = APIRouter()

router.include_router(users_router, prefix="/users", tags=["users"])
router.include_router(leaderboard_router, prefix="/leaderboard", tags=["leaderboard"])
