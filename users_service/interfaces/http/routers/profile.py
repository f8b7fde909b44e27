import structlog
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ....application.dto import UpdateProfileInput
from ....application.use_cases.show_profile import ShowProfile
from ....application.use_cases.update_profile import UpdateProfile
from ....domain.errors import AppError
from ....infrastructure.db import get_db
from ....infrastructure.metrics import profile_update_errors_total, profile_updates_total
from ....infrastructure.repositories import UserRepository
from ....infrastructure.security import PasswordHasher
from ..authz import get_user_id
from ..schemas import UpdateProfileReq, UserResp

router = APIRouter(prefix="/api/profile", tags=["profile"])
logger = structlog.get_logger()

@router.get("", response_model=UserResp)
def show_profile(
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    try:
        user = ShowProfile(repo=UserRepository(db)).execute(user_id)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return UserResp.model_validate(user)

@router.put("", response_model=UserResp)
def update_profile(
    payload: UpdateProfileReq,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    uc = UpdateProfile(repo=UserRepository(db), hasher=PasswordHasher())
    try:
        user = uc.execute(UpdateProfileInput(user_id=user_id, **payload.model_dump()))
    except AppError as e:
        profile_update_errors_total.labels(kind=type(e).__name__).inc()
        logger.info("profile_update_rejected", user_id=user_id, reason=e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    profile_updates_total.inc()
    logger.info("profile_updated", user_id=user.id, password_changed=bool(payload.password))
    return UserResp.model_validate(user)
