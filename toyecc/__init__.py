#!/usr/bin/env python3

# Copyright (C) 2024-2026 The toyecc developers
#
# This file is part of toyecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of toyecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the toyecc package."

name = "toyecc"
__version__ = "2026.10.1"
__author__ = "The toyecc developers"
__author_email__ = "devs@toyecc.org"
__copyright__ = "Copyright (C) 2024-2026 The toyecc developers"
__license__ = "MIT License"
