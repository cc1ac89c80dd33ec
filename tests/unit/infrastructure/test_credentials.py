"""
Name: Credential Services Tests

Responsibilities:
  - Argon2PasswordHasher: hash/verify and tolerance to malformed hashes
  - SecretsCredentialGenerator: length and character-class guarantees
"""

import string

import pytest

from user_api.infrastructure.services import SecretsCredentialGenerator
from user_api.infrastructure.services.credential_generator import SYMBOLS

pytestmark = pytest.mark.unit


class TestArgon2PasswordHasher:
    def test_hash_is_not_plaintext_and_verifies(self, password_hasher):
        hashed = password_hasher.hash("S3cret!pw")

        assert hashed != "S3cret!pw"
        assert hashed.startswith("$argon2")
        assert password_hasher.verify("S3cret!pw", hashed) is True

    def test_wrong_password_is_false(self, password_hasher):
        hashed = password_hasher.hash("S3cret!pw")

        assert password_hasher.verify("other", hashed) is False

    def test_malformed_hash_is_false(self, password_hasher):
        assert password_hasher.verify("S3cret!pw", "not-a-hash") is False

    def test_same_password_gets_different_salts(self, password_hasher):
        assert password_hasher.hash("S3cret!pw") != password_hasher.hash("S3cret!pw")


class TestSecretsCredentialGenerator:
    def test_default_length(self, credential_generator):
        assert len(credential_generator.generate()) == 12

    @pytest.mark.parametrize("length", [8, 16, 32])
    def test_configured_length(self, length):
        assert len(SecretsCredentialGenerator(length=length).generate()) == length

    def test_every_password_has_all_classes(self, credential_generator):
        for _ in range(50):
            pw = credential_generator.generate()
            assert any(c in string.ascii_uppercase for c in pw)
            assert any(c in string.ascii_lowercase for c in pw)
            assert any(c in string.digits for c in pw)
            assert any(c in SYMBOLS for c in pw)

    def test_passwords_differ(self, credential_generator):
        generated = {credential_generator.generate() for _ in range(20)}

        assert len(generated) == 20

    def test_rejects_short_length(self):
        with pytest.raises(ValueError, match=">= 8"):
            SecretsCredentialGenerator(length=7)
