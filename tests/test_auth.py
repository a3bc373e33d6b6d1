"""Tests for the auth blueprint."""

import tempfile
import unittest
from unittest.mock import MagicMock, patch

from tests.helpers import make_app

MOCK_USER_ID = "vendor7"
MOCK_USER_PAYLOAD = {"uid": MOCK_USER_ID, "name": "Asha Patel"}


class AuthTestCase(unittest.TestCase):
    def setUp(self):
        """Set up a test client with Firebase auth mocked out."""
        self.mock_auth_service = MagicMock()
        patcher = patch("vendormart.auth.routes.auth", new=self.mock_auth_service)
        patcher.start()
        self.addCleanup(patcher.stop)

        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.app = make_app(self.tmpdir.name)
        self.client = self.app.test_client()

    def test_session_login(self):
        self.mock_auth_service.verify_id_token.return_value = MOCK_USER_PAYLOAD
        response = self.client.post(
            "/auth/session_login", json={"idToken": "mock-token"}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["user_id"], MOCK_USER_ID)
        self.mock_auth_service.verify_id_token.assert_called_once_with("mock-token")
        with self.client.session_transaction() as sess:
            self.assertEqual(sess["user_id"], MOCK_USER_ID)
            self.assertEqual(sess["name"], "Asha Patel")

        self.assertEqual(self.client.get("/groups/").status_code, 200)

    def test_session_login_invalid_token(self):
        self.mock_auth_service.verify_id_token.side_effect = ValueError("bad token")
        response = self.client.post("/auth/session_login", json={"idToken": "bad"})
        self.assertEqual(response.status_code, 401)
        with self.client.session_transaction() as sess:
            self.assertNotIn("user_id", sess)

    def test_session_login_missing_token(self):
        response = self.client.post("/auth/session_login", json={})
        self.assertEqual(response.status_code, 400)
        self.mock_auth_service.verify_id_token.assert_not_called()

    def test_logout(self):
        with self.client.session_transaction() as sess:
            sess["user_id"] = MOCK_USER_ID
        response = self.client.post("/auth/logout")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get("/groups/").status_code, 401)

    def test_csrf_token(self):
        response = self.client.get("/auth/csrf_token")
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.get_json()["csrf_token"])


if __name__ == "__main__":
    unittest.main()
