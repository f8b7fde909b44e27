from dataclasses import dataclass

@dataclass
class User:
    id: str | None
    name: str
    surname: str
    email: str
    type: str = "Discente"  # "Docente" | "Discente"
    password: str = ""  # всегда хэш, не открытый текст
