"""OpenAI client factory.

A client is built for every request from ``settings.OPENAI_API_KEY``,
which is read once when settings load; changing the key needs a restart.
``None`` means the assistant is not configured.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.conf import settings
from openai import OpenAI

logger = structlog.get_logger(__name__)


def get_ai_client() -> Optional[OpenAI]:
    api_key = settings.OPENAI_API_KEY
    if not api_key:
        logger.error("assistant.api_key_missing")
        return None
    return OpenAI(api_key=api_key)
