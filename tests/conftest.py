import os

# Настройки читаются при импорте, поэтому окружение задаём до импорта приложения
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_users.db")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import uuid
from dataclasses import replace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from users_service.domain.entities import User
from users_service.infrastructure.db import get_db
from users_service.infrastructure.models import Base
from users_service.main import app


class FakeUsersRepository:
    """Хранилище пользователей в памяти"""

    def __init__(self):
        self.users: dict[str, User] = {}
        self.saved: list[User] = []

    def find_by_id(self, user_id):
        user = self.users.get(user_id)
        return replace(user) if user else None

    def find_by_email(self, email):
        for user in self.users.values():
            if user.email == email:
                return replace(user)
        return None

    def create(self, name, surname, email, type, password_hash):
        user = User(id=str(uuid.uuid4()), name=name, surname=surname,
                    email=email, type=type, password=password_hash)
        self.users[user.id] = user
        return replace(user)

    def save(self, user):
        self.users[user.id] = replace(user)
        self.saved.append(replace(user))
        return replace(user)


class FakeHashProvider:
    """Хэш совпадает с паролем, чтобы тесты были быстрыми"""

    def hash(self, plain):
        return plain

    def compare(self, plain, hashed):
        return plain == hashed


@pytest.fixture
def users_repo():
    return FakeUsersRepository()


@pytest.fixture
def hash_provider():
    return FakeHashProvider()


# Тестовая БД в памяти, одно соединение на все потоки
test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def tables():
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session(tables):
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(tables):
    """Фикстура для тестового клиента"""
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    # Очищаем после теста
    app.dependency_overrides.pop(get_db, None)
