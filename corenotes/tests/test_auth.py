import time
import unittest

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from jose import jwt

from corenotes.auth import create_access_token, require_user
from corenotes.config import Settings, get_settings


class RequireUserTests(unittest.TestCase):
    def setUp(self):
        self.settings = Settings(auth_secret="test-secret", auth_cookie_name="sid")
        app = FastAPI()
        app.dependency_overrides[get_settings] = lambda: self.settings

        @app.get("/whoami")
        def whoami(user: str = Depends(require_user)):
            return {"user": user}

        self.client = TestClient(app)

    def token(self, user_id: str, **kwargs) -> str:
        return create_access_token(user_id, settings=self.settings, **kwargs)

    def test_bearer_token(self):
        response = self.client.get(
            "/whoami", headers={"Authorization": f"Bearer {self.token('u1')}"}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"user": "u1"})

    def test_session_cookie(self):
        response = self.client.get(
            "/whoami", headers={"Cookie": f"sid={self.token('u2')}"}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"user": "u2"})

    def test_missing_token(self):
        response = self.client.get("/whoami")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.headers["www-authenticate"], "Bearer")

    def test_wrong_secret(self):
        other = Settings(auth_secret="other-secret")
        token = create_access_token("u1", settings=other)
        response = self.client.get(
            "/whoami", headers={"Authorization": f"Bearer {token}"}
        )
        self.assertEqual(response.status_code, 401)

    def test_expired_token(self):
        response = self.client.get(
            "/whoami",
            headers={"Authorization": f"Bearer {self.token('u1', ttl_seconds=-60)}"},
        )
        self.assertEqual(response.status_code, 401)

    def test_token_without_subject(self):
        token = jwt.encode(
            {"exp": int(time.time()) + 60}, "test-secret", algorithm="HS256"
        )
        response = self.client.get(
            "/whoami", headers={"Authorization": f"Bearer {token}"}
        )
        self.assertEqual(response.status_code, 401)


if __name__ == "__main__":
    unittest.main()
