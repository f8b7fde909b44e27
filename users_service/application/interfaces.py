from ..domain.entities import User

class IUserRepository:
    def find_by_id(self, user_id: str) -> User | None: ...
    def find_by_email(self, email: str) -> User | None: ...
    def create(self, name: str, surname: str, email: str, type: str, password_hash: str) -> User: ...
    def save(self, user: User) -> User: ...

class IHashProvider:
    def hash(self, plain: str) -> str: ...
    def compare(self, plain: str, hashed: str) -> bool: ...
