import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from ....application.use_cases.authenticate_user import AuthenticateUser
from ....config import settings
from ....domain.errors import AppError
from ....infrastructure.db import get_db
from ....infrastructure.repositories import UserRepository
from ....infrastructure.security import PasswordHasher, issue_token
from ..rate_limit import limiter
from ..schemas import SessionReq, SessionResp, UserResp

router = APIRouter(prefix="/api/sessions", tags=["sessions"])
logger = structlog.get_logger()

# Более строгий лимит для логина (защита от брутфорса)
@router.post("", response_model=SessionResp)
@limiter.limit(f"{settings.LOGIN_RATE_LIMIT_PER_MINUTE}/minute")
def create_session(
    request: Request,
    payload: SessionReq,
    db: Session = Depends(get_db),
):
    uc = AuthenticateUser(repo=UserRepository(db), hasher=PasswordHasher(), issue_token=issue_token)
    try:
        result = uc.execute(payload.email, payload.password)
    except AppError as e:
        logger.info("login_failed")
        raise HTTPException(status_code=e.status_code, detail=e.message)
    logger.info("login_succeeded", user_id=result.user.id)
    return SessionResp(user=UserResp.model_validate(result.user), access_token=result.token)
