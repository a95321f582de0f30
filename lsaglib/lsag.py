#!/usr/bin/env python3

# Copyright (C) The lsaglib developers
#
# This file is part of lsaglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lsaglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Linkable ring signature, simplified demonstration scheme.

A ring signature claims that one member of a group endorsed a message
without telling which one; its key image lets anybody tell
whether two signatures share the signer.

This is NOT a sound LSAG construction: there is no elliptic curve math,
just SHA256 hashing and one RSASSA-PKCS1-v1_5 signature,
and it must not be used to protect anything.
Given the n group public keys pk_0..pk_{n-1}, the signer index s,
and the message m (|| being text concatenation):

    key_image = SHA256hex(SHA256hex(m||pk_s)||sk_s)

    r_i = random 32 bytes hex-string, i in [0, n)
    c = SHA256hex(m||JSON([pk_0, .., pk_{n-1}])||r_0)
    for i in [0, n):
        e_i = base64(RSASSA(m||c, sk_s))     if i == s
        e_i = base64(SHA256(m||r_i||c))      otherwise
        c = SHA256hex(c||e_i||pk_i)

The stored challenge is the final c, not the seed:
the seed is never transmitted and cannot be recomputed.
Verification replays the chain starting from the final c,
but it only checks that every ring entry is at least 10 UTF-16 code units
long (the length JavaScript reports):
the replayed value is not compared with anything
and the signer slot is not checked against any public key.
Any well-formed signature verifies.

The key image hashes the message too: two signatures by the same signer
over different messages are not linked.
"""

from dataclasses import InitVar, dataclass, field
from typing import List, Optional, Sequence

from dataclasses_json import DataClassJsonMixin, config

from lsaglib import rsassa
from lsaglib.alias import PemKey
from lsaglib.exceptions import LsagTypeError, LsagValueError
from lsaglib.group import Group
from lsaglib.hashes import sha256_b64, sha256_hex
from lsaglib.utils import b64_from_bytes, json_array, random_scalar, utf16_length

# shortest ring entry accepted by the verifier, in UTF-16 code units
MIN_ENTRY_SIZE = 10


@dataclass(frozen=True)
class RingSig(DataClassJsonMixin):
    """Linkable ring signature.

    - ring_entries: one base64 string per group member, in member order
    - challenge: hex-string, the final value of the chained challenge
    - key_image: hex-string, the signer fingerprint used for linkability
    - message: the signed message
    - group_id: id of the group the signature was built against
    """

    ring_entries: List[str] = field(metadata=config(field_name="ringSignature"))
    challenge: str
    key_image: str = field(metadata=config(field_name="keyImage"))
    message: str
    group_id: str = field(metadata=config(field_name="groupId"))
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # type checks only: entry contents are the verifier's business
        if not isinstance(self.ring_entries, (list, tuple)):
            raise LsagTypeError(f"invalid ring entries: {self.ring_entries!r}")
        for i, entry in enumerate(self.ring_entries):
            if not isinstance(entry, str):
                raise LsagTypeError(f"invalid ring entry {i}: {entry!r}")
        for name in ("challenge", "key_image", "message", "group_id"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise LsagTypeError(f"invalid {name}: {value!r}")


def key_image(msg: str, prv_key: PemKey, pub_key: PemKey) -> str:
    """Return the hex-string key image of the signer.

    It is a function of the PEM texts and of the message:
    the same signer gets a different key image for each message.
    """

    return sha256_hex(sha256_hex(msg, pub_key), prv_key)


def _seed_challenge(msg: str, pub_keys: Sequence[PemKey], r_0: str) -> str:
    return sha256_hex(msg, json_array(pub_keys), r_0)


def _next_challenge(c: str, entry: str, pub_key: PemKey) -> str:
    return sha256_hex(c, entry, pub_key)


def sign(
    msg: str,
    prv_key: PemKey,
    pub_key: PemKey,
    group: Group,
    signer_index: int,
    scalars: Optional[Sequence[str]] = None,
) -> RingSig:
    """Return the ring signature of the message.

    The signer is the group member at signer_index;
    it is up to the caller to make sure that its public key is pub_key.

    The random scalars (one hex-string per member) are drawn
    from the OS random source, unless provided.
    Only scalars[0] seeds the challenge, wherever the signer sits;
    the signer's own scalar never enters its ring entry.
    """

    if not group.id:
        raise LsagValueError("group must have an id to generate a ring signature")

    members = group.members
    n = len(members)
    if not 0 <= signer_index < n:
        raise LsagValueError(f"signer index not in 0..{n - 1}: {signer_index}")

    if scalars is None:
        scalars = [random_scalar() for _ in range(n)]
    elif len(scalars) != n:
        err_msg = f"invalid number of scalars: {len(scalars)} instead of {n}"
        raise LsagValueError(err_msg)

    k_image = key_image(msg, prv_key, pub_key)

    c = _seed_challenge(msg, group.public_keys, scalars[0])
    ring_entries: List[str] = []
    for i, member in enumerate(members):
        if i == signer_index:
            entry = b64_from_bytes(rsassa.sign_(msg + c, prv_key))
        else:
            entry = sha256_b64(msg, scalars[i], c)
        ring_entries.append(entry)
        c = _next_challenge(c, entry, member.public_key)

    return RingSig(ring_entries, c, k_image, msg, group.id)


def assert_as_valid(sig: RingSig, group: Group) -> str:
    """Replay the challenge chain, raising on a malformed ring entry.

    The chain starts from the stored (final) challenge;
    the returned value is the end of the replayed chain.
    Entries beyond the group size are ignored,
    missing entries are malformed ones.
    """

    c = sig.challenge
    for i, member in enumerate(group.members):
        entry = sig.ring_entries[i] if i < len(sig.ring_entries) else None
        if not entry or utf16_length(entry) < MIN_ENTRY_SIZE:
            raise LsagValueError(f"invalid ring entry {i}: {entry!r}")
        c = _next_challenge(c, entry, member.public_key)
    return c


def verify(sig: RingSig, group: Group) -> bool:
    """Ring signature verification.

    It returns False for a missing or too short ring entry,
    True otherwise: see the module docstring.
    """

    try:
        assert_as_valid(sig, group)
    except LsagValueError:
        return False

    return True


def linked(sig1: RingSig, sig2: RingSig) -> bool:
    """Return True if the two signatures share the key image.

    Exact string comparison: no normalization and no group scoping.
    """

    return sig1.key_image == sig2.key_image
