import unittest
from datetime import timedelta

import jwt

from freeeats.config.settings import Settings
from freeeats.core.security import Identity, TokenVerifier, create_dev_token
from tests.helpers import make_settings


class TestTokenVerifier(unittest.TestCase):

    def setUp(self):
        self.config = make_settings()
        self.verifier = TokenVerifier(self.config)

    def test_dev_token_roundtrip(self):
        token = create_dev_token(self.config, "user_1", name="Alex", email="alex@example.edu")
        identity = self.verifier.verify(token)
        self.assertEqual(identity, Identity(subject="user_1", name="Alex", email="alex@example.edu"))

    def test_expired_token(self):
        token = create_dev_token(self.config, "user_1", expires_delta=timedelta(seconds=-10))
        with self.assertRaises(jwt.ExpiredSignatureError):
            self.verifier.verify(token)

    def test_wrong_secret(self):
        token = create_dev_token(make_settings(JWT_SECRET_KEY="other"), "user_1")
        with self.assertRaises(jwt.InvalidSignatureError):
            self.verifier.verify(token)

    def test_subject_is_required(self):
        token = jwt.encode({"name": "No subject"}, self.config.JWT_SECRET_KEY, algorithm="HS256")
        with self.assertRaises(jwt.MissingRequiredClaimError):
            self.verifier.verify(token)

    def test_production_rejects_shared_secret_tokens(self):
        config = make_settings(ENVIRONMENT="production", JWT_SECRET_KEY="change-me-in-production")
        verifier = TokenVerifier(config)
        token = jwt.encode({"sub": "user_victim"}, "change-me-in-production", algorithm="HS256")
        self.assertFalse(verifier.accepts_shared_secret)
        with self.assertRaises(jwt.InvalidTokenError):
            verifier.verify(token)

    def test_guessable_secret_is_not_the_default(self):
        for guess in ("change-me-in-production", "secret"):
            token = jwt.encode({"sub": "user_victim"}, guess, algorithm="HS256")
            with self.assertRaises(jwt.InvalidSignatureError):
                TokenVerifier(Settings(CLERK_JWKS_URL=None)).verify(token)

    def test_default_secret_is_random_per_instance(self):
        first, second = Settings(), Settings()
        self.assertEqual(len(first.JWT_SECRET_KEY), 32)
        self.assertNotEqual(first.JWT_SECRET_KEY, second.JWT_SECRET_KEY)


class TestIdentityFromClaims(unittest.TestCase):

    def test_name_from_given_and_family_name(self):
        identity = Identity.from_claims({"sub": "u", "given_name": "Ada", "family_name": "Lovelace"})
        self.assertEqual(identity.name, "Ada Lovelace")

    def test_picture_claim(self):
        identity = Identity.from_claims({"sub": "u", "picture": "http://img"})
        self.assertEqual(identity.image_url, "http://img")
        self.assertIsNone(identity.name)


if __name__ == "__main__":
    unittest.main()
