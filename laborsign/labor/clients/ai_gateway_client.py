# ============================================
# labor/clients/ai_gateway_client.py
# ============================================
import logging
from typing import Dict, List, Optional

import requests
from django.conf import settings

from labor.exceptions import LegalAdviceError

logger = logging.getLogger(__name__)


class AIGatewayClient:
    """Client for the chat-completions gateway used for legal advice. No retries, no streaming."""

    @classmethod
    def _config(cls) -> Dict:
        return {
            "url": getattr(settings, "AI_GATEWAY_URL", ""),
            "api_key": getattr(settings, "AI_GATEWAY_API_KEY", ""),
            "model": getattr(settings, "AI_ADVICE_MODEL", ""),
            "timeout": getattr(settings, "AI_GATEWAY_TIMEOUT", 30),
        }

    @classmethod
    def complete(cls, messages: List[Dict[str, str]]) -> Optional[str]:
        """
        Send one non-streaming completion request.
        Returns the first choice's content (None when the gateway answered without one).
        """
        cfg = cls._config()
        if not cfg["api_key"]:
            raise LegalAdviceError("AI_GATEWAY_API_KEY is not configured", status_code=500)

        try:
            response = requests.post(
                cfg["url"],
                headers={
                    "Authorization": f"Bearer {cfg['api_key']}",
                    "Content-Type": "application/json",
                },
                json={"model": cfg["model"], "messages": messages, "stream": False},
                timeout=cfg["timeout"],
            )
        except requests.RequestException as e:
            logger.error("[advice] gateway unreachable: %s", e)
            raise LegalAdviceError("AI 분석에 실패했습니다.", status_code=500) from e

        if response.status_code == 429:
            logger.warning("[advice] gateway rate limited")
            raise LegalAdviceError("요청이 너무 많습니다. 잠시 후 다시 시도해주세요.", status_code=429)
        if response.status_code == 402:
            logger.warning("[advice] gateway quota exhausted")
            raise LegalAdviceError("AI 서비스 사용량을 초과했습니다.", status_code=402)
        if not response.ok:
            logger.error("[advice] gateway error: %s %s", response.status_code, response.text[:500])
            raise LegalAdviceError("AI 분석에 실패했습니다.", status_code=500)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("[advice] gateway returned non-JSON body")
            raise LegalAdviceError("AI 분석에 실패했습니다.", status_code=500) from e

        choices = data.get("choices") or []
        if not choices:
            return None
        return (choices[0].get("message") or {}).get("content")
