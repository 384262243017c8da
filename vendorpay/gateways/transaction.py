"""Legacy transaction builder for native SOL transfers."""

import struct
from dataclasses import dataclass

import base58

from vendorpay.gateways.keys import Keypair, PublicKey

SYSTEM_PROGRAM_ID = PublicKey(bytes(32))

# System Program instruction index for Transfer
SYSTEM_TRANSFER = 2

MAX_LAMPORTS = 2**64 - 1


@dataclass(frozen=True)
class SignedTransaction:
    """A signed transaction ready for ``sendTransaction``."""

    signature: bytes
    message: bytes

    @property
    def signature_b58(self) -> str:
        return base58.b58encode(self.signature).decode()

    def serialize(self) -> bytes:
        return encode_compact_u16(1) + self.signature + self.message


def encode_compact_u16(value: int) -> bytes:
    """Encode a length prefix in Solana's compact-u16 (shortvec) format."""
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"compact-u16 out of range: {value}")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def build_transfer_message(
    payer: PublicKey,
    recipient: PublicKey,
    lamports: int,
    recent_blockhash: str,
) -> bytes:
    """Serialize a legacy message with a single System Program transfer.

    Account keys are ``[payer, recipient, system program]``; the payer is the
    only signer and the program is the only read-only account. A transfer to
    self collapses the recipient into the payer slot.
    """
    if not 0 <= lamports <= MAX_LAMPORTS:
        raise ValueError(f"lamports out of range: {lamports}")
    blockhash = base58.b58decode(recent_blockhash)
    if len(blockhash) != 32:
        raise ValueError("recent blockhash must decode to 32 bytes")

    if recipient == payer:
        account_keys = [payer, SYSTEM_PROGRAM_ID]
        transfer_accounts = bytes([0, 0])
    else:
        account_keys = [payer, recipient, SYSTEM_PROGRAM_ID]
        transfer_accounts = bytes([0, 1])
    program_index = len(account_keys) - 1

    # header: required signatures, read-only signed, read-only unsigned
    header = bytes([1, 0, 1])
    data = struct.pack("<IQ", SYSTEM_TRANSFER, lamports)

    instruction = (
        bytes([program_index])
        + encode_compact_u16(len(transfer_accounts))
        + transfer_accounts
        + encode_compact_u16(len(data))
        + data
    )

    return (
        header
        + encode_compact_u16(len(account_keys))
        + b"".join(key.raw for key in account_keys)
        + blockhash
        + encode_compact_u16(1)
        + instruction
    )


def sign_transfer(
    payer: Keypair,
    recipient: PublicKey,
    lamports: int,
    recent_blockhash: str,
) -> SignedTransaction:
    message = build_transfer_message(payer.pubkey, recipient, lamports, recent_blockhash)
    return SignedTransaction(signature=payer.sign(message), message=message)
