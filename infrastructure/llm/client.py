import asyncio
import traceback
from typing import List, Any, Optional, Dict, Tuple

import aiohttp

from infrastructure.llm.usage import track_usage
from infrastructure.logging.logger import setup_logger
from settings import settings

RETRY_STATUSES = {429, 500, 502, 503, 504}


class LLMRequestError(Exception):
    """LLM API не вернул пригодный ответ."""

    def __init__(self, message: str, status: Optional[int] = None):
        self.message = message
        self.status = status
        super().__init__(self.message)


class LLMClient:
    """Клиент для chat/completions API OpenRouter."""

    def __init__(
        self,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        max_retries: int = 1,
        timeout_seconds: float = 30,
    ):
        self.logger = setup_logger("llm_client")
        self.model_name = model or settings.OPENROUTER_MODEL
        self.provider = "openrouter"
        self.api_key = api_key if api_key is not None else settings.OPENROUTER_API_KEY
        self.url = f"{(base_url or settings.OPENROUTER_BASE_URL).rstrip('/')}/chat/completions"
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self.max_retries = max_retries
        self.retry_delay = 1.0

    async def get_response(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.3,
        max_tokens: int = 500,
        response_format: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Вызывает LLM и возвращает первый вариант ответа.

        Args:
            system_prompt: Системный промпт.
            user_prompt: Запрос пользователя.
            temperature: Температура генерации.
            max_tokens: Максимальное количество токенов.
            response_format: Формат ответа (например, json_schema).

        Returns:
            Dict с content, finish_reason и usage.

        Raises:
            LLMRequestError: если после всех попыток ответа нет.
        """
        self.logger.info(f"[INFO] Запуск LLM {self.model_name}")
        messages = self._build_messages(system_prompt, user_prompt)
        json_payload = self._build_payload(messages, temperature, max_tokens, response_format)
        return await self._send_request(json_payload)

    def _build_messages(self, system_prompt: str, user_prompt: str) -> List[Dict[str, str]]:
        """Формирует список сообщений для API."""
        messages = [{"role": "system", "content": system_prompt}]
        if user_prompt:
            messages.append({"role": "user", "content": user_prompt})
        self.logger.debug(f"[DEBUG] Сформированные сообщения: {messages}")
        return messages

    def _build_payload(
        self,
        messages: List[Dict[str, str]],
        temperature: float,
        max_tokens: int,
        response_format: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """Формирует JSON-payload для API-запроса."""
        json_payload = {
            "model": self.model_name,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        if response_format is not None:
            json_payload["response_format"] = response_format
        return json_payload

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _post(self, session: aiohttp.ClientSession, json_payload: Dict[str, Any]) -> Tuple[int, Any]:
        """Один POST к API: (статус, JSON-тело) или (статус, текст ошибки)."""
        async with session.post(self.url, json=json_payload, headers=self._headers()) as response:
            if response.status != 200:
                return response.status, await response.text()
            return response.status, await response.json()

    @track_usage()
    async def _send_request(self, json_payload: Dict[str, Any]) -> Dict[str, Any]:
        """Отправляет запрос к LLM API с ретраями на временных ошибках."""
        last_error: Optional[LLMRequestError] = None

        for retry in range(self.max_retries + 1):
            try:
                async with aiohttp.ClientSession(timeout=self.timeout) as session:
                    self.logger.info(f"[DEBUG] AI API request: {self.url}, попытка {retry + 1}/{self.max_retries + 1}")
                    status, data = await self._post(session, json_payload)
            except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
                # ValueError: тело ответа не JSON
                self.logger.error(f"[ERROR] Ошибка сети при вызове LLM: {e}")
                self.logger.debug(f"[DEBUG] Traceback: {traceback.format_exc()}")
                last_error = LLMRequestError(str(e))
                await asyncio.sleep(self.retry_delay * (2 ** retry))
                continue

            self.logger.info(f"[DEBUG] Статус ответа API: {status}")
            if status != 200:
                self.logger.error(f"[ERROR] Получен статус {status}, тело: {data}")
                last_error = LLMRequestError(f"HTTP {status}", status=status)
                if status in RETRY_STATUSES:
                    await asyncio.sleep(self.retry_delay * (2 ** retry))
                    continue
                raise last_error

            return self._parse_response(data)

        self.logger.error(f"[ERROR] Все {self.max_retries + 1} попытки провалились")
        raise last_error or LLMRequestError("LLM request failed")

    def _parse_response(self, data: Any) -> Dict[str, Any]:
        self.logger.debug(f"[DEBUG] Ответ API: {data}")

        if not isinstance(data, dict):
            raise LLMRequestError(f"Ответ API не является объектом: {type(data).__name__}")

        choices = data.get("choices") or []
        if not choices or not isinstance(choices[0], dict):
            raise LLMRequestError("В ответе API отсутствуют choices")

        choice = choices[0]
        content = (choice.get("message") or {}).get("content")
        if content is None:
            raise LLMRequestError("Содержимое ответа равно None")

        return {
            "content": content,
            "finish_reason": choice.get("finish_reason"),
            "usage": data.get("usage", {}),
        }
