import functools
import logging
from typing import Callable, Optional, Awaitable

from infrastructure.llm.helpers import extract_usage_info


def track_usage(
    logger: Optional[logging.Logger] = None,
    model_name: Optional[str] = None,
    provider: Optional[str] = None
):
    """
        Асинхронный декоратор для логирования расхода токенов LLM.

        Извлекает usage (input_tokens, output_tokens) из ответа и пишет его в лог.
        Если параметры не переданы, берёт self.logger, self.model_name, self.provider.

        Пример использования:

        @track_usage()
        async def _send_request(self, payload: dict) -> dict:
            ...

        Notes:
            - Ошибки в декораторе логируются как WARNING и не прерывают основную функцию.
        """
    def decorator(func: Callable[..., Awaitable[dict]]):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            response = await func(*args, **kwargs)

            _logger = logger or getattr(args[0], "logger", None)
            try:
                usage = extract_usage_info(_logger, response)
                if usage is None:
                    return response

                input_tokens, output_tokens = usage
                _model_name = model_name or getattr(args[0], "model_name", None)
                _provider = provider or getattr(args[0], "provider", None)

                if _logger:
                    _logger.info(
                        f"usage: provider={_provider}, model={_model_name}, "
                        f"input={input_tokens}, output={output_tokens}"
                    )
            except Exception as e:
                if _logger:
                    _logger.warning(f"[track_usage] Ошибка в декораторе: {e}")

            return response
        return wrapper
    return decorator
