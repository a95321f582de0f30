#!/usr/bin/env python3

# Copyright (C) The lsaglib developers
#
# This file is part of lsaglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lsaglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

All ring computations hash the concatenation of text values:
the helpers accept the parts separately and join them
before the UTF-8 encoding, so that

    sha256_hex(c, entry, pub_key) == sha256_hex(c + entry + pub_key)
"""

import hashlib

from lsaglib.alias import String
from lsaglib.utils import b64_from_bytes, bytes_from_string


def _join(parts: tuple) -> bytes:
    # UTF-8 encoding and concatenation commute
    return b"".join(bytes_from_string(part) for part in parts)


def sha256(*parts: String) -> bytes:
    """Return the SHA256(*) of the concatenated input parts."""
    return hashlib.sha256(_join(parts)).digest()


def sha256_hex(*parts: String) -> str:
    """Return the SHA256(*) hex-string of the concatenated input parts."""
    return sha256(*parts).hex()


def sha256_b64(*parts: String) -> str:
    """Return the base64 encoded SHA256(*) of the concatenated input parts."""
    return b64_from_bytes(sha256(*parts))
