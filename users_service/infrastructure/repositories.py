from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from .models import UserORM
from ..domain.entities import User
from ..domain.errors import ConflictError
from ..application.interfaces import IUserRepository

def to_domain(u: UserORM) -> User:
    return User(
        id=u.id, name=u.name, surname=u.surname,
        email=u.email, type=u.type, password=u.password_hash,
    )

class UserRepository(IUserRepository):
    def __init__(self, db: Session): self.db = db

    def _commit(self) -> None:
        # уникальный индекс по email ловит гонку между проверкой и записью
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("E-mail already in use")

    def find_by_id(self, user_id: str) -> User | None:
        row = self.db.get(UserORM, user_id)
        return to_domain(row) if row else None

    def find_by_email(self, email: str) -> User | None:
        row = self.db.query(UserORM).filter(UserORM.email == email).first()
        return to_domain(row) if row else None

    def create(self, name: str, surname: str, email: str, type: str, password_hash: str) -> User:
        row = UserORM(name=name, surname=surname, email=email, type=type, password_hash=password_hash)
        self.db.add(row); self._commit(); self.db.refresh(row)
        return to_domain(row)

    def save(self, user: User) -> User:
        row = self.db.get(UserORM, user.id)
        if row is None:
            raise LookupError(f"User {user.id} is not persisted")
        row.name = user.name
        row.surname = user.surname
        row.email = user.email
        row.type = user.type
        row.password_hash = user.password
        self._commit(); self.db.refresh(row)
        return to_domain(row)
