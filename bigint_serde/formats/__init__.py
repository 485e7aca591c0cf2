# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Concrete formats for the serializer contracts.

Each module exposes dumps(obj) and loads(data, cls=Integer).
"""

from . import json, msgpack, postcard

FORMATS = {
    "postcard": postcard,
    "json": json,
    "msgpack": msgpack,
}

__all__ = ["FORMATS", "json", "msgpack", "postcard"]
