from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from ..config import settings
from ..domain.entities import User

pwd = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
    bcrypt_sha256__truncate_error=False,
)

class PasswordHasher:
    def hash(self, plain: str) -> str: return pwd.hash(plain)
    def compare(self, plain: str, hashed: str) -> bool:
        try:
            return pwd.verify(plain, hashed)
        except ValueError:
            # в базе не хэш passlib
            return False

def create_access_token(sub: str, user_type: str, minutes: int | None = None) -> str:
    minutes = minutes if minutes is not None else settings.ACCESS_TOKEN_MINUTES
    exp = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    payload = {"sub": sub, "type": user_type, "exp": exp}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def issue_token(user: User) -> str:
    return create_access_token(sub=user.id, user_type=user.type)


def decode_token(token: str) -> str:
    """Возвращает id пользователя (sub) из токена или кидает JWTError."""
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    sub = payload.get("sub")
    if not sub:
        raise JWTError("No subject")
    return sub
