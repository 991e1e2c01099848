import os
import shutil
import tempfile
import unittest


class TestAuthRegisterValidation(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.tmp_dir = tempfile.mkdtemp()
        cls.data_file = os.path.join(cls.tmp_dir, "db.json")

        from commentboard import create_app

        cls.app = create_app({
            "DATA_FILE": cls.data_file,
            "JWT_SECRET_KEY": "test-secret-key-with-enough-length-for-hs256",
            "TESTING": True,
        })
        cls.client = cls.app.test_client()

    @classmethod
    def tearDownClass(cls):
        shutil.rmtree(cls.tmp_dir, ignore_errors=True)

    def setUp(self):
        if os.path.exists(self.data_file):
            os.remove(self.data_file)

    def test_register_rejects_missing_password(self):
        response = self.client.post(
            "/api/auth/register",
            json={
                "name": "No Password",
                "email": "nopass@example.com"
            }
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "name, email, password required")

    def test_register_rejects_missing_email(self):
        response = self.client.post(
            "/api/auth/register",
            json={
                "name": "No Email",
                "password": "pass123"
            }
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "name, email, password required")

    def test_register_rejects_blank_name(self):
        response = self.client.post(
            "/api/auth/register",
            json={
                "name": "   ",
                "email": "blank@example.com",
                "password": "pass123"
            }
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "name, email, password required")

    def test_login_rejects_missing_fields(self):
        response = self.client.post("/api/auth/login", json={"email": "a@example.com"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "email and password required")


if __name__ == "__main__":
    unittest.main()
