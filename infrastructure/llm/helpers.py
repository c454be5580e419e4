import re
from logging import Logger
from typing import Optional, Tuple

_FENCE_START = re.compile(r"^```(?:json)?\s*")
_FENCE_END = re.compile(r"\s*```$")


def extract_usage_info(logger: Optional[Logger], response: dict) -> Optional[Tuple[int, int]]:
    """Хелпер для подсчета токенов"""
    try:
        usage_data = response.get("usage")
        if not usage_data:
            return None

        # У OpenAI-совместимых API это prompt_tokens и completion_tokens
        input_tokens = usage_data.get("input_tokens") or usage_data.get("prompt_tokens", 0)
        output_tokens = usage_data.get("output_tokens") or usage_data.get("completion_tokens", 0)

        return input_tokens, output_tokens
    except Exception as e:
        if logger:
            logger.warning(f"[extract_usage_info] Ошибка: {e}")
        return None


def strip_code_fences(content: str) -> str:
    """Убирает обёртку ```json ... ``` или ``` ... ```, если модель её добавила."""
    clean = content.strip()
    if clean.startswith("```"):
        clean = _FENCE_START.sub("", clean, count=1)
        clean = _FENCE_END.sub("", clean, count=1)
    return clean.strip()
