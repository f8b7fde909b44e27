from dataclasses import dataclass
from typing import Callable

from ...domain.entities import User
from ...domain.errors import UnauthorizedError
from ..interfaces import IHashProvider, IUserRepository

@dataclass
class AuthResult:
    user: User
    token: str

class AuthenticateUser:
    def __init__(
        self,
        repo: IUserRepository,
        hasher: IHashProvider,
        issue_token: Callable[[User], str],
    ):
        self.repo = repo
        self.hasher = hasher
        self.issue_token = issue_token

    def execute(self, email: str, password: str) -> AuthResult:
        user = self.repo.find_by_email(email)
        # одинаковый ответ для неизвестного email и неверного пароля
        if not user or not self.hasher.compare(password, user.password):
            raise UnauthorizedError("Incorrect email/password combination")
        return AuthResult(user=user, token=self.issue_token(user))
