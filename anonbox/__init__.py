# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Anonymous inbox API: public share links, private owner inbox."""

__version__ = "0.1.0"
