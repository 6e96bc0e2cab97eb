"""Module to contain compatibility objects based on different Python versions supported."""

__all__ = ["NotRequired", "StrEnum", "Unpack", "assert_never"]

import sys

from typing_extensions import NotRequired, Unpack, assert_never

if sys.version_info >= (3, 11):
    from enum import StrEnum
else:
    from backports.strenum import StrEnum
