from ...domain.entities import User
from ...domain.errors import NotFoundError
from ..interfaces import IUserRepository

class ShowProfile:
    def __init__(self, repo: IUserRepository):
        self.repo = repo

    def execute(self, user_id: str) -> User:
        user = self.repo.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user
