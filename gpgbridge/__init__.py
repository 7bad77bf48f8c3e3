# Copyright the gpgbridge contributors
# SPDX-License-Identifier: Apache-2.0

"""
Configure base logger for gpgbridge (see gpgbridge.log for details).

"""
import gpgbridge.log


# gpgbridge version
__version__ = "0.1.0"
