"""Tests for the app factory."""

import os
import tempfile
import unittest
from unittest.mock import patch

from tests.helpers import make_app
from vendormart import create_app
from vendormart.persistence import JsonFileSnapshotStore


class AppTestCase(unittest.TestCase):
    """Test case for the app factory."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def test_404_error_handler(self):
        """Test the JSON 404 error handler."""
        app = make_app(self.tmpdir.name)
        with app.test_client() as client:
            response = client.get("/non_existent_page")
            self.assertEqual(response.status_code, 404)
            self.assertEqual(response.get_json()["message"], "Page Not Found")

    @patch("firebase_admin.initialize_app")
    def test_testing_mode_skips_firebase(self, mock_init_app):
        make_app(self.tmpdir.name)
        mock_init_app.assert_not_called()

    def test_config_from_environment(self):
        env_vars = {
            "SECRET_KEY": "s3cret",
            "SNAPSHOT_FOLDER": self.tmpdir.name,
            "SEED_DEMO_DATA": "false",
        }
        with patch.dict(os.environ, env_vars):
            app = create_app({"TESTING": True})

        self.assertEqual(app.config["SECRET_KEY"], "s3cret")
        self.assertEqual(app.config["SNAPSHOT_BACKEND"], "file")
        self.assertFalse(app.config["SEED_DEMO_DATA"])
        store = app.extensions["vendormart.snapshots"]
        self.assertIsInstance(store, JsonFileSnapshotStore)
        self.assertEqual(store.folder, self.tmpdir.name)

    def test_unknown_snapshot_backend(self):
        with self.assertRaises(ValueError):
            make_app(self.tmpdir.name, SNAPSHOT_BACKEND="carrier-pigeon")

    def test_csrf_enabled_by_default(self):
        app = make_app(self.tmpdir.name, WTF_CSRF_ENABLED=True)
        with app.test_client() as client:
            with client.session_transaction() as sess:
                sess["user_id"] = "v1"
            response = client.post("/groups/1/leave")
            self.assertEqual(response.status_code, 400)
            self.assertIn("session may have expired", response.get_json()["message"])


if __name__ == "__main__":
    unittest.main()
