#!/usr/bin/env python3

# Copyright (C) The ecstealth developers
#
# This file is part of ecstealth. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecstealth including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions raised
by ecstealth and those raised by other codebase (btclib included).

Users are usually better off just dealing with the regular
ValueError and RuntimeError from which the ecstealth versions are derived.
"""


class StealthValueError(ValueError):
    pass


class InvalidScalarError(StealthValueError):
    "A secret is zero, negative, or not less than the curve order."


class EncodingOverflowError(StealthValueError):
    "A coordinate does not fit the fixed width of the point codec."


class StealthRuntimeError(RuntimeError):
    pass


class PointMismatchError(StealthRuntimeError):
    "An algebraic invariant of the stealth scheme does not hold."
