from users_service.infrastructure.security import create_access_token


def register(client, email="ada@gmail.com", password="12345678", type="Docente"):
    response = client.post("/api/users", json={
        "name": "Ada",
        "surname": "Lovelace",
        "email": email,
        "type": type,
        "password": password,
    })
    assert response.status_code == 201
    return response.json()


def login(client, email="ada@gmail.com", password="12345678"):
    return client.post("/api/sessions", json={"email": email, "password": password})


def auth_headers(client, **kwargs):
    token = login(client, **kwargs).json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_register_user(client):
    data = register(client)
    assert data["email"] == "ada@gmail.com"
    assert data["type"] == "Docente"
    assert "password" not in data


def test_register_user_duplicate(client):
    register(client)
    response = client.post("/api/users", json={
        "name": "Other", "surname": "User", "email": "ada@gmail.com",
        "type": "Discente", "password": "12345678",
    })
    assert response.status_code == 409


def test_register_user_invalid_payload(client):
    response = client.post("/api/users", json={
        "name": "Ada", "surname": "Lovelace", "email": "invalid-email",
        "type": "Admin", "password": "123",
    })
    assert response.status_code == 422


def test_login(client):
    user = register(client)
    response = login(client)
    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["user"]["id"] == user["id"]

    assert login(client, password="wrong-password").status_code == 401


def test_show_profile(client):
    register(client)
    response = client.get("/api/profile", headers=auth_headers(client))
    assert response.status_code == 200
    assert response.json()["name"] == "Ada"


def test_profile_requires_token(client):
    assert client.get("/api/profile").status_code == 401
    response = client.get("/api/profile", headers={"Authorization": "Bearer invalid_token"})
    assert response.status_code == 401


def test_update_profile(client):
    register(client)
    headers = auth_headers(client)
    response = client.put("/api/profile", headers=headers, json={
        "name": "Bill",
        "surname": "Gates",
        "email": "gates@gmail.com",
        "type": "Discente",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Bill"
    assert data["surname"] == "Gates"
    assert data["email"] == "gates@gmail.com"
    assert data["type"] == "Discente"
    assert "password" not in data

    assert client.get("/api/profile", headers=headers).json()["email"] == "gates@gmail.com"


def test_update_profile_unknown_user(client):
    token = create_access_token(sub="non-existing-user-id", user_type="Docente")
    response = client.put("/api/profile", headers={"Authorization": f"Bearer {token}"}, json={
        "name": "Ada", "surname": "Lovelace", "email": "ada@gmail.com", "type": "Docente",
    })
    assert response.status_code == 404


def test_update_profile_email_taken(client):
    register(client, email="ada@gmail.com")
    register(client, email="gates@gmail.com")
    headers = auth_headers(client, email="gates@gmail.com")
    response = client.put("/api/profile", headers=headers, json={
        "name": "Bill", "surname": "Gates", "email": "ada@gmail.com", "type": "Docente",
    })
    assert response.status_code == 409


def test_update_password_errors(client):
    register(client)
    headers = auth_headers(client)
    body = {"name": "Ada", "surname": "Lovelace", "email": "ada@gmail.com", "type": "Docente"}

    response = client.put("/api/profile", headers=headers, json={**body, "password": "123123"})
    assert response.status_code == 400

    response = client.put("/api/profile", headers=headers, json={
        **body, "old_password": "", "password": "123123",
    })
    assert response.status_code == 400

    response = client.put("/api/profile", headers=headers, json={
        **body, "old_password": "wrong-old-password", "password": "123123",
    })
    assert response.status_code == 401


def test_change_password_flow(client):
    """Регистрация, смена пароля и вход с новым паролем"""
    register(client)
    headers = auth_headers(client)
    response = client.put("/api/profile", headers=headers, json={
        "name": "Ada", "surname": "Lovelace", "email": "ada@gmail.com", "type": "Docente",
        "old_password": "12345678", "password": "novasenha",
    })
    assert response.status_code == 200

    assert login(client, password="12345678").status_code == 401
    assert login(client, password="novasenha").status_code == 200


def test_metrics(client):
    client.get("/health")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "http_requests_total" in response.text
