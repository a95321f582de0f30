#!/usr/bin/env python3

# Copyright (C) The lsaglib developers
#
# This file is part of lsaglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lsaglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""RSA Signature Scheme with Appendix (RSASSA-PKCS1-v1_5).

Implementation according to RFC 8017, with SHA256 as hash function:

https://www.rfc-editor.org/rfc/rfc8017#section-8.2

This is the plain single-key signature: one key pair, no ring.
The same primitive signs the real signer's slot of a ring signature.

Signatures travel as standard base64 strings,
messages are UTF-8 encoded when provided as text.
"""

from dataclasses import dataclass, field

from Crypto.Hash import SHA256
from Crypto.Signature import pkcs1_15
from dataclasses_json import DataClassJsonMixin, config

from lsaglib.alias import Key, String
from lsaglib.exceptions import LsagRuntimeError, LsagValueError
from lsaglib.hashes import sha256_hex
from lsaglib.keys import rsa_key_from_pem
from lsaglib.utils import b64_from_bytes, bytes_from_b64, bytes_from_string


@dataclass(frozen=True)
class SignedMessage(DataClassJsonMixin):
    # base64
    signature: str
    # hex-string SHA256 of the message
    message_hash: str = field(metadata=config(field_name="messageHash"))


def message_hash(msg: String) -> str:
    "Return the hex-string SHA256 of the message."
    return sha256_hex(msg)


def sign_(msg: String, prv_key: Key) -> bytes:
    """Return the raw RSASSA-PKCS1-v1_5 signature of the message.

    Malformed keys raise pycryptodome's own errors,
    a public-only key raises TypeError.
    """

    key = rsa_key_from_pem(prv_key)
    h = SHA256.new(bytes_from_string(msg))
    return pkcs1_15.new(key).sign(h)


def sign(msg: String, prv_key: Key) -> SignedMessage:
    "Sign the message, returning the base64 signature and the message hash."

    signature = b64_from_bytes(sign_(msg, prv_key))
    return SignedMessage(signature, message_hash(msg))


def assert_as_valid(msg: String, sig: String, pub_key: Key) -> None:
    # It raises Errors, while verify should always return True or False

    key = rsa_key_from_pem(pub_key)
    sig_bytes = bytes_from_b64(sig)
    if not sig_bytes:
        raise LsagValueError("empty signature")
    h = SHA256.new(bytes_from_string(msg))
    try:
        pkcs1_15.new(key).verify(h, sig_bytes)
    except ValueError as e:
        raise LsagRuntimeError("signature verification failed") from e


def verify(msg: String, sig: String, pub_key: Key) -> bool:
    """Verify a base64 RSASSA-PKCS1-v1_5 signature.

    A wrong or malformed signature is not an error: it returns False.
    A malformed public key is an error and gets raised.
    """

    key = rsa_key_from_pem(pub_key)
    try:
        assert_as_valid(msg, sig, key)
    except (LsagValueError, LsagRuntimeError):
        return False

    return True
