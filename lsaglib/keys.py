#!/usr/bin/env python3

# Copyright (C) The lsaglib developers
#
# This file is part of lsaglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lsaglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""RSA key pairs in PEM encoding.

Private keys are exported as PKCS#8 ("BEGIN PRIVATE KEY"),
public keys as SubjectPublicKeyInfo ("BEGIN PUBLIC KEY").
"""

from dataclasses import InitVar, dataclass, field
from typing import Optional

from Crypto.PublicKey import RSA
from Crypto.PublicKey.RSA import RsaKey
from dataclasses_json import DataClassJsonMixin, config

from lsaglib.alias import Key, PemKey
from lsaglib.config import get_settings
from lsaglib.exceptions import LsagTypeError, LsagValueError


def rsa_key_from_pem(key: Key) -> RsaKey:
    """Return a pycryptodome RSA key.

    It supports PEM text (str or bytes) and RsaKey objects,
    which go untouched.
    A malformed PEM text raises pycryptodome's own ValueError.
    """

    if isinstance(key, RsaKey):
        return key
    if isinstance(key, (str, bytes)):
        return RSA.import_key(key)
    raise LsagTypeError(f"not an RSA key: {type(key).__name__}")


@dataclass(frozen=True)
class KeyPair(DataClassJsonMixin):
    public_key: PemKey = field(metadata=config(field_name="publicKey"))
    private_key: PemKey = field(repr=False, metadata=config(field_name="privateKey"))
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        prv_key = rsa_key_from_pem(self.private_key)
        if not prv_key.has_private():
            raise LsagValueError("not a private key")
        if prv_key.publickey() != rsa_key_from_pem(self.public_key):
            raise LsagValueError("public key does not match the private key")


def gen_keys(bits: Optional[int] = None) -> KeyPair:
    "Return a new PEM encoded RSA private/public key-pair."

    settings = get_settings()
    if bits is None:
        bits = settings.RSA_KEY_SIZE
    key = RSA.generate(bits, e=settings.RSA_PUBLIC_EXPONENT)
    public_key = key.publickey().export_key(format="PEM").decode("ascii")
    private_key = key.export_key(format="PEM", pkcs=8).decode("ascii")
    return KeyPair(public_key, private_key, check_validity=False)
