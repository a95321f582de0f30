#!/usr/bin/env python3

# Copyright (C) The lsaglib developers
#
# This file is part of lsaglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lsaglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""In-memory storage of groups and ring signatures.

Signatures are stored by key image: a later signature
with the same key image replaces the earlier one.
Groups are referenced by id and fetched live,
so changing the members of a group after signing
can break the verification of its signatures.
"""

import logging
import threading
import uuid
from dataclasses import replace
from typing import Dict, List, Optional

from lsaglib.exceptions import LsagValueError
from lsaglib.group import Group
from lsaglib.lsag import RingSig

logger = logging.getLogger(__name__)


class MemStorage:
    """Thread-safe in-memory store of groups and ring signatures."""

    def __init__(self) -> None:
        self._groups: Dict[str, Group] = {}
        self._signatures: Dict[str, RingSig] = {}
        self._lock = threading.Lock()

    # groups

    def get_group(self, group_id: str) -> Optional[Group]:
        with self._lock:
            return self._groups.get(group_id)

    def get_all_groups(self) -> List[Group]:
        with self._lock:
            return list(self._groups.values())

    def create_group(self, group: Group) -> Group:
        "Store the group, assigning it a fresh id if it has none."

        if not group.id:
            group = replace(group, id=str(uuid.uuid4()))
        with self._lock:
            self._groups[group.id] = group
        logger.info(f"Created group {group.id} with {len(group.members)} members")
        return group

    def update_group(self, group: Group) -> Group:
        if not group.id:
            raise LsagValueError("cannot update a group without an id")
        with self._lock:
            self._groups[group.id] = group
        logger.info(f"Updated group {group.id}")
        return group

    def delete_group(self, group_id: str) -> bool:
        with self._lock:
            deleted = self._groups.pop(group_id, None) is not None
        if deleted:
            logger.info(f"Deleted group {group_id}")
        return deleted

    # signatures

    def get_signature(self, key_image: str) -> Optional[RingSig]:
        with self._lock:
            return self._signatures.get(key_image)

    def get_all_signatures(self) -> List[RingSig]:
        with self._lock:
            return list(self._signatures.values())

    def get_signatures_by_group(self, group_id: str) -> List[RingSig]:
        with self._lock:
            return [sig for sig in self._signatures.values() if sig.group_id == group_id]

    def create_signature(self, sig: RingSig) -> RingSig:
        with self._lock:
            if sig.key_image in self._signatures:
                logger.warning(f"Replacing stored signature {sig.key_image}")
            self._signatures[sig.key_image] = sig
        logger.info(f"Stored signature {sig.key_image} for group {sig.group_id}")
        return sig
