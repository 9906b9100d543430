# SPDX-License-Identifier: GPL-3.0-only
__version__ = "0.3.0"
