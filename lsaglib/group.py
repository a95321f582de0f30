#!/usr/bin/env python3

# Copyright (C) The lsaglib developers
#
# This file is part of lsaglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lsaglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Signing groups.

A group is an ordered list of members, each one with a PEM public key.
The member position (the signer index) enters every ring computation:
the order must not change between signing and verification.

Member ids are caller-assigned and unique by convention only.
"""

from dataclasses import InitVar, dataclass, field
from typing import List, Optional

from dataclasses_json import DataClassJsonMixin, config

from lsaglib.alias import PemKey
from lsaglib.exceptions import LsagTypeError


@dataclass(frozen=True)
class GroupMember(DataClassJsonMixin):
    id: str
    public_key: PemKey = field(metadata=config(field_name="publicKey"))
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if not isinstance(self.id, str):
            raise LsagTypeError(f"invalid member id: {self.id!r}")
        if not isinstance(self.public_key, str):
            raise LsagTypeError(f"invalid member public key: {self.public_key!r}")


@dataclass(frozen=True)
class Group(DataClassJsonMixin):
    name: str
    members: List[GroupMember] = field(default_factory=list)
    # assigned by the storage on creation if missing
    id: Optional[str] = None
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    @property
    def public_keys(self) -> List[PemKey]:
        "Return the member public keys, in member order."
        return [member.public_key for member in self.members]

    def assert_valid(self) -> None:
        if self.id is not None and not isinstance(self.id, str):
            raise LsagTypeError(f"invalid group id: {self.id!r}")
        if not isinstance(self.name, str):
            raise LsagTypeError(f"invalid group name: {self.name!r}")
        for member in self.members:
            if not isinstance(member, GroupMember):
                raise LsagTypeError(f"not a group member: {member!r}")
            member.assert_valid()
