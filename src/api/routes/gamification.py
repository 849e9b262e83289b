"""Gamification procedures."""

from typing import List

from fastapi import APIRouter

from core.dependencies import AchievementManagerDep
from schemas.achievement import Achievement, CreateAchievementRequest

router = APIRouter(prefix="/rpc", tags=["Gamification"])


@router.get(
    "/getAchievements",
    response_model=List[Achievement],
    summary="List active achievements",
)
def get_achievements(manager: AchievementManagerDep) -> List[Achievement]:
    return [Achievement.model_validate(m) for m in manager.list_active_achievements()]


@router.post("/createAchievement", response_model=Achievement, summary="Create an achievement")
def create_achievement(
    req: CreateAchievementRequest, manager: AchievementManagerDep
) -> Achievement:
    return Achievement.model_validate(manager.create_achievement(req))
