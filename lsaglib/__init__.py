#!/usr/bin/env python3

# Copyright (C) The lsaglib developers
#
# This file is part of lsaglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lsaglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the lsaglib package."

name = "lsaglib"
__version__ = "2026.10.18"
__author__ = "The lsaglib developers"
__author_email__ = "devs@lsaglib.org"
__copyright__ = "Copyright (C) 2025-2026 The lsaglib developers"
__license__ = "MIT License"
