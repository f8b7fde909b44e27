from ...domain.entities import User
from ...domain.errors import ConflictError
from ..dto import RegisterUserInput
from ..interfaces import IHashProvider, IUserRepository

class RegisterUser:
    def __init__(self, repo: IUserRepository, hasher: IHashProvider):
        self.repo = repo
        self.hasher = hasher

    def execute(self, data: RegisterUserInput) -> User:
        if self.repo.find_by_email(data.email):
            raise ConflictError("E-mail already in use")
        pwd_hash = self.hasher.hash(data.password)
        return self.repo.create(data.name, data.surname, data.email, data.type, pwd_hash)
