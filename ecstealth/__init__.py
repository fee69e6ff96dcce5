#!/usr/bin/env python3

# Copyright (C) The ecstealth developers
#
# This file is part of ecstealth. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecstealth including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecstealth package."

import logging

name = "ecstealth"
__version__ = "2026.10.1"
__author__ = "The ecstealth developers"
__author_email__ = "devs@ecstealth.org"
__copyright__ = "Copyright (C) 2026 The ecstealth developers"
__license__ = "MIT License"

logging.getLogger(__name__).addHandler(logging.NullHandler())
