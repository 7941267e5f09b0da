"""JSON codec used for request bodies and response decoding."""
from __future__ import annotations

import json
from typing import Any, Optional

from core.logging_config import get_logger

logger = get_logger(__name__)


class JSONCodec:
    """Compact JSON encoding; lenient decoding.

    ``decode`` returns ``None`` for empty or malformed input instead of
    raising, so a bad body reaches the caller as ``None``.
    """

    separators = (",", ":")

    def encode(self, obj: Any) -> str:
        return json.dumps(obj, separators=self.separators, ensure_ascii=False)

    def decode(self, text: Optional[str]) -> Any:
        if not text:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            logger.warning(
                "api_response_decode_failed",
                error=str(exc),
                preview=text[:200],
            )
            return None
