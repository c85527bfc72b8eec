"""
Base64 encoding and decoding of UTF-8 text
"""
import base64
import binascii
import re
from typing import Any

from app.core.errors import (INPUT_NOT_STRING_MESSAGE, INVALID_BASE64_MESSAGE,
                             MISSING_INPUT_MESSAGE, BadRequestError)
from app.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)

_NON_ALPHABET = re.compile(r"[^A-Za-z0-9+/]")
_URL_SAFE = str.maketrans("-_", "+/")
# JSON pairs surrogates into one code point, so any left over is unpaired
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


class CodecService:
    """Service converting text to and from standard Base64"""

    def __init__(self, strict: bool = True):
        self.strict = strict

    @staticmethod
    def require_input(value: Any) -> str:
        """
        Validate the `input` field of a request

        Any falsy JSON value (missing, null, "", 0, false, [], {}) counts
        as not provided.

        Raises:
            BadRequestError: If the value is falsy or not a string
        """
        if not value:
            raise BadRequestError(MISSING_INPUT_MESSAGE)
        if not isinstance(value, str):
            raise BadRequestError(INPUT_NOT_STRING_MESSAGE)
        return value

    def encode(self, text: str) -> str:
        """Standard Base64 of the UTF-8 bytes of text, lone surrogates as U+FFFD"""
        text = _LONE_SURROGATE.sub("\ufffd", text)
        return base64.b64encode(text.encode("utf-8")).decode("ascii")

    def decode(self, encoded: str) -> str:
        """
        Decode Base64 text back into a UTF-8 string

        Args:
            encoded: Base64 text

        Returns:
            Decoded text

        Raises:
            BadRequestError: In strict mode, if encoded is not valid Base64
                or does not decode to valid UTF-8
        """
        if self.strict:
            return self._decode_strict(encoded)
        return self._decode_lenient(encoded)

    def _decode_strict(self, encoded: str) -> str:
        stripped = encoded.strip()
        if not stripped:
            raise BadRequestError(INVALID_BASE64_MESSAGE)
        try:
            raw = base64.b64decode(stripped, validate=True)
            return raw.decode("utf-8")
        except (binascii.Error, ValueError) as e:
            # UnicodeDecodeError is a ValueError
            logger.debug("Rejected Base64 input: %s", e)
            raise BadRequestError(INVALID_BASE64_MESSAGE) from e

    def _decode_lenient(self, encoded: str) -> str:
        # Decoding stops at the first padding character
        data = encoded.translate(_URL_SAFE).split("=", 1)[0]
        data = _NON_ALPHABET.sub("", data)
        # A single trailing sextet cannot form a byte
        if len(data) % 4 == 1:
            data = data[:-1]
        data += "=" * (-len(data) % 4)
        raw = base64.b64decode(data)
        return raw.decode("utf-8", errors="replace")
