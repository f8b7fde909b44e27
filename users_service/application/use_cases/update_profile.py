from ...domain.entities import User
from ...domain.errors import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from ..dto import UpdateProfileInput
from ..interfaces import IHashProvider, IUserRepository

class UpdateProfile:
    def __init__(self, repo: IUserRepository, hasher: IHashProvider):
        self.repo = repo
        self.hasher = hasher

    def execute(self, data: UpdateProfileInput) -> User:
        user = self.repo.find_by_id(data.user_id)
        if not user:
            raise NotFoundError("User not found")

        owner = self.repo.find_by_email(data.email)
        if owner and owner.id != user.id:
            raise ConflictError("E-mail already in use")

        user.name = data.name
        user.surname = data.surname
        user.email = data.email
        user.type = data.type

        if data.password:
            if not data.old_password:
                raise ValidationError("You need to inform the old password to set a new password")
            if not self.hasher.compare(data.old_password, user.password):
                raise UnauthorizedError("Old password does not match")
            user.password = self.hasher.hash(data.password)

        return self.repo.save(user)
