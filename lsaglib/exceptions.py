#!/usr/bin/env python3

# Copyright (C) The lsaglib developers
#
# This file is part of lsaglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lsaglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by lsaglib from those raised by other codebase
(e.g. pycryptodome rejecting a malformed PEM key).

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the lsaglib versions are derived.
"""


class LsagValueError(ValueError):
    pass


class LsagTypeError(TypeError):
    pass


class LsagRuntimeError(RuntimeError):
    pass


class GroupNotFoundError(LsagValueError):
    pass


class SignatureNotFoundError(LsagValueError):
    pass
