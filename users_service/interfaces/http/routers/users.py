import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from ....application.dto import RegisterUserInput
from ....application.use_cases.register_user import RegisterUser
from ....config import settings
from ....domain.errors import AppError
from ....infrastructure.db import get_db
from ....infrastructure.metrics import users_registered_total
from ....infrastructure.repositories import UserRepository
from ....infrastructure.security import PasswordHasher
from ..rate_limit import limiter
from ..schemas import RegisterReq, UserResp

router = APIRouter(prefix="/api/users", tags=["users"])
logger = structlog.get_logger()

@router.post("", response_model=UserResp, status_code=status.HTTP_201_CREATED)
@limiter.limit(f"{settings.RATE_LIMIT_PER_MINUTE}/minute")
def register(
    request: Request,
    payload: RegisterReq,
    db: Session = Depends(get_db),
):
    uc = RegisterUser(repo=UserRepository(db), hasher=PasswordHasher())
    try:
        user = uc.execute(RegisterUserInput(**payload.model_dump()))
    except AppError as e:
        logger.info("user_register_rejected", reason=e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    users_registered_total.inc()
    logger.info("user_registered", user_id=user.id, type=user.type)
    return UserResp.model_validate(user)
