def test_signup_login_me_logout(client):
    response = client.post("/api/auth/signup", json={
        "full_name": "Jo Player",
        "email": "Jo@Example.com",
        "password": "padel-rules-1",
    })
    assert response.status_code == 201, response.text

    response = client.post("/api/auth/login", json={"email": "jo@example.com", "password": "padel-rules-1"})
    assert response.status_code == 200
    headers = {"Authorization": f"Bearer {response.json()['access_token']}"}

    me = client.get("/api/auth/me", headers=headers).json()
    assert me["email"] == "jo@example.com"
    assert me["full_name"] == "Jo Player"
    assert me["is_admin"] is False

    assert client.post("/api/auth/logout", headers=headers).status_code == 204
    assert client.get("/api/auth/me", headers=headers).status_code == 401


def test_duplicate_email_rejected(client, member):
    response = client.post("/api/auth/signup", json={
        "full_name": "Someone Else",
        "email": member.email,
        "password": "another-pass-1",
    })
    assert response.status_code == 400


def test_short_password_rejected(client):
    response = client.post("/api/auth/signup", json={
        "full_name": "Jo Player",
        "email": "jo@example.com",
        "password": "short",
    })
    assert response.status_code == 422


def test_wrong_password(client, member):
    response = client.post("/api/auth/login", json={"email": member.email, "password": "wrong-password"})
    assert response.status_code == 401


def test_inactive_user_cannot_login(client, db, member):
    member.is_active = False
    db.commit()
    response = client.post("/api/auth/login", json={"email": member.email, "password": "padel-rules-1"})
    assert response.status_code == 400


def test_garbage_token(client):
    assert client.get("/api/auth/me", headers={"Authorization": "Bearer nope"}).status_code == 401
