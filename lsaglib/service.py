#!/usr/bin/env python3

# Copyright (C) The lsaglib developers
#
# This file is part of lsaglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lsaglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Request layer on top of the signature modules.

It validates caller input before reaching lsaglib.lsag and lsaglib.rsassa,
fetches groups and signatures from the storage,
and stores the ring signatures it generates.

Invalid input raises LsagValueError;
a missing group or signature raises the more specific
GroupNotFoundError or SignatureNotFoundError.
"""

import logging
from typing import List, Optional

from lsaglib import lsag, rsassa
from lsaglib.exceptions import (
    GroupNotFoundError,
    LsagValueError,
    SignatureNotFoundError,
)
from lsaglib.group import Group
from lsaglib.keys import KeyPair, gen_keys
from lsaglib.lsag import RingSig
from lsaglib.rsassa import SignedMessage
from lsaglib.storage import MemStorage

logger = logging.getLogger(__name__)


def _require(value: Optional[str], what: str) -> str:
    if not isinstance(value, str) or not value:
        raise LsagValueError(f"{what} is required")
    return value


class LsagService:
    """Key generation, plain signatures, groups, and ring signatures."""

    def __init__(self, storage: Optional[MemStorage] = None) -> None:
        self.storage = MemStorage() if storage is None else storage

    # keys and plain single-key signatures

    def generate_keys(self) -> KeyPair:
        key_pair = gen_keys()
        logger.info("Generated RSA key pair")
        return key_pair

    def sign_message(self, message: str, prv_key: str) -> SignedMessage:
        _require(message, "Message")
        _require(prv_key, "Private key")
        return rsassa.sign(message, prv_key)

    def verify_signature(self, message: str, signature: str, pub_key: str) -> bool:
        _require(message, "Message")
        _require(signature, "Signature")
        _require(pub_key, "Public key")
        return rsassa.verify(message, signature, pub_key)

    # groups

    def create_group(self, group: Group) -> Group:
        return self.storage.create_group(group)

    def get_all_groups(self) -> List[Group]:
        return self.storage.get_all_groups()

    def get_group(self, group_id: str) -> Group:
        group = self.storage.get_group(group_id)
        if group is None:
            raise GroupNotFoundError(f"Group not found: {group_id}")
        return group

    def update_group(self, group_id: str, group: Group) -> Group:
        "Replace the group stored under group_id, keeping that id."

        self.get_group(group_id)
        if group.id != group_id:
            group = Group(group.name, group.members, group_id)
        return self.storage.update_group(group)

    def delete_group(self, group_id: str) -> None:
        if not self.storage.delete_group(group_id):
            raise GroupNotFoundError(f"Group not found: {group_id}")

    # ring signatures

    def generate_ring_signature(
        self,
        message: str,
        prv_key: str,
        pub_key: str,
        group_id: str,
        signer_index: int,
    ) -> RingSig:
        """Generate and store the ring signature of the message.

        The signer must be the group member at signer_index,
        i.e. pub_key must be the public key of that member.
        """

        _require(message, "Message")
        _require(prv_key, "Private key")
        _require(pub_key, "Public key")
        _require(group_id, "Group ID")
        if (
            not isinstance(signer_index, int)
            or isinstance(signer_index, bool)
            or signer_index < 0
        ):
            raise LsagValueError("Signer index must be a non-negative integer")

        group = self.get_group(group_id)
        if signer_index >= len(group.members):
            raise LsagValueError(f"Invalid signer index: {signer_index}")
        if group.members[signer_index].public_key != pub_key:
            raise LsagValueError("Public key doesn't match the key at signer index")

        sig = lsag.sign(message, prv_key, pub_key, group, signer_index)
        logger.info(
            f"Generated ring signature {sig.key_image} over {len(group.members)} members"
        )
        return self.storage.create_signature(sig)

    def verify_ring_signature(self, sig: RingSig, group_id: str) -> bool:
        _require(group_id, "Group ID")
        group = self.get_group(group_id)
        valid = lsag.verify(sig, group)
        logger.info(f"Ring signature {sig.key_image} verified: {valid}")
        return valid

    def check_linkability(self, sig1_id: str, sig2_id: str) -> bool:
        "Return True if the two stored signatures share the signer key image."

        _require(sig1_id, "First signature ID")
        _require(sig2_id, "Second signature ID")
        sig1 = self.storage.get_signature(sig1_id)
        sig2 = self.storage.get_signature(sig2_id)
        if sig1 is None or sig2 is None:
            raise SignatureNotFoundError("One or both signatures not found")
        return lsag.linked(sig1, sig2)

    def get_all_signatures(self) -> List[RingSig]:
        return self.storage.get_all_signatures()

    def get_signatures_by_group(self, group_id: str) -> List[RingSig]:
        return self.storage.get_signatures_by_group(group_id)
