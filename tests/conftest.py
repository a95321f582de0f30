#!/usr/bin/env python3

# Copyright (C) The lsaglib developers
#
# This file is part of lsaglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lsaglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Shared test fixtures.

RSA key generation is slow: key pairs are generated once per session.
"""

from typing import List

import pytest

from lsaglib.group import Group, GroupMember
from lsaglib.keys import KeyPair, gen_keys


@pytest.fixture(scope="session")
def key_pairs() -> List[KeyPair]:
    return [gen_keys() for _ in range(3)]


@pytest.fixture
def group(key_pairs: List[KeyPair]) -> Group:
    members = [
        GroupMember(member_id, key_pair.public_key)
        for member_id, key_pair in zip(("alice", "bob", "carol"), key_pairs)
    ]
    return Group("reviewers", members, "group-1")
