from __future__ import annotations

from ._characters import UNRESERVED, is_unreserved
from ._errors import DecodeError, InvalidCharacter, Utf8ReconstructionError
from .encoder import encode, decode
from .validator import validate, is_valid
