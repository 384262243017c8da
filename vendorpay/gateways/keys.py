"""Solana key and address decoding."""

from dataclasses import dataclass

import base58
from nacl.signing import SigningKey

PUBKEY_LENGTH = 32
KEYPAIR_LENGTH = 64


class InvalidKeypair(ValueError):
    """Keypair string could not be decoded."""


class InvalidPublicKey(ValueError):
    """Address string could not be decoded."""


@dataclass(frozen=True)
class PublicKey:
    """A 32-byte ed25519 account address."""

    raw: bytes

    def __str__(self) -> str:
        return base58.b58encode(self.raw).decode()

    @classmethod
    def from_base58(cls, value: str) -> "PublicKey":
        try:
            raw = base58.b58decode(value)
        except ValueError as e:
            raise InvalidPublicKey("invalid base58 encoding") from e
        if len(raw) != PUBKEY_LENGTH:
            raise InvalidPublicKey(f"expected {PUBKEY_LENGTH} bytes, got {len(raw)}")
        return cls(raw)


class Keypair:
    """Signing identity decoded from a base58 ``secret || public`` string."""

    def __init__(self, signing_key: SigningKey) -> None:
        self._signing_key = signing_key
        self.pubkey = PublicKey(bytes(signing_key.verify_key))

    def __repr__(self) -> str:
        return f"Keypair(pubkey={self.pubkey})"

    @classmethod
    def from_base58(cls, value: str) -> "Keypair":
        try:
            raw = base58.b58decode(value)
        except ValueError as e:
            raise InvalidKeypair("invalid base58 encoding") from e
        if len(raw) != KEYPAIR_LENGTH:
            raise InvalidKeypair(f"expected {KEYPAIR_LENGTH} bytes, got {len(raw)}")

        signing_key = SigningKey(raw[:PUBKEY_LENGTH])
        if bytes(signing_key.verify_key) != raw[PUBKEY_LENGTH:]:
            raise InvalidKeypair("public key does not match secret key")
        return cls(signing_key)

    @classmethod
    def generate(cls) -> "Keypair":
        return cls(SigningKey.generate())

    def to_base58(self) -> str:
        raw = bytes(self._signing_key) + self.pubkey.raw
        return base58.b58encode(raw).decode()

    def sign(self, message: bytes) -> bytes:
        """Return the detached 64-byte ed25519 signature of ``message``."""
        return self._signing_key.sign(message).signature
