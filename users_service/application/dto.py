from dataclasses import dataclass

@dataclass
class RegisterUserInput:
    name: str
    surname: str
    email: str
    type: str
    password: str

@dataclass
class UpdateProfileInput:
    user_id: str
    name: str
    surname: str
    email: str
    type: str
    old_password: str | None = None
    password: str | None = None
