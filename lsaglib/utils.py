#!/usr/bin/env python3

# Copyright (C) The lsaglib developers
#
# This file is part of lsaglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lsaglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities."""

import base64
import binascii
import json
import re
import secrets
from typing import Optional, Sequence

from lsaglib.alias import String
from lsaglib.config import get_settings
from lsaglib.exceptions import LsagValueError

# JSON.stringify escapes lone surrogates only
_LONE_SURROGATE = re.compile(
    r"[\ud800-\udbff](?![\udc00-\udfff])|(?<![\ud800-\udbff])[\udc00-\udfff]"
)


def bytes_from_string(string: String) -> bytes:
    """Return the UTF-8 encoding of a text string.

    If the input is not a string, then it goes untouched.
    Adjacent surrogate pairs are combined and lone surrogates
    become U+FFFD, as in JavaScript text encoding.
    """

    if isinstance(string, str):
        try:
            return string.encode("utf-8")
        except UnicodeEncodeError:
            utf16 = string.encode("utf-16-le", "surrogatepass")
            return utf16.decode("utf-16-le", "replace").encode("utf-8")
    return string


def utf16_length(string: str) -> int:
    "Return the number of UTF-16 code units of a text string."
    return len(string.encode("utf-16-le", "surrogatepass")) // 2


def b64_from_bytes(data: bytes) -> str:
    "Return the standard (padded) base64 encoding of the input bytes."
    return base64.b64encode(data).decode("ascii")


def bytes_from_b64(b64: String) -> bytes:
    """Return the bytes encoded by a standard base64 string.

    Leading/trailing blanks are stripped,
    any other non-alphabet character is an error.
    """

    if isinstance(b64, str):
        b64 = b64.strip()
    try:
        return base64.b64decode(b64, validate=True)
    except binascii.Error as e:
        raise LsagValueError(f"invalid base64 string: {e}") from e


def json_array(items: Sequence[str]) -> str:
    """Return the compact JSON array of the input strings.

    No whitespace after separators and no escaping of non-ASCII
    characters but lone surrogates, which become \\udXXXX escapes:
    the same text a JavaScript JSON.stringify would produce.
    """

    text = json.dumps(list(items), separators=(",", ":"), ensure_ascii=False)
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def random_scalar(size: Optional[int] = None) -> str:
    """Return a fresh random scalar as hex-string.

    The scalar is drawn from the OS cryptographic random source;
    size is in bytes and defaults to the configured SCALAR_SIZE.
    """

    if size is None:
        size = get_settings().SCALAR_SIZE
    if size < 1:
        raise LsagValueError(f"invalid scalar size: {size}")
    return secrets.token_hex(size)
