import pytest
from fastapi.testclient import TestClient

from infrastructure.database.session import Database
from infrastructure.llm.client import LLMRequestError
from main import create_app
from tools.recommendations.recommendation_tool import WalkRecommendationService
from tools.walks import WalkSessionManager
from tools.weather.weather_tool import WeatherService


class StubLLMClient:
    """Отдаёт заранее заданный ответ и считает вызовы."""

    def __init__(self, content=None, finish_reason="stop", error=None):
        self.content = content
        self.finish_reason = finish_reason
        self.error = error
        self.calls = []

    async def get_response(self, system_prompt, user_prompt, **kwargs):
        self.calls.append({"system_prompt": system_prompt, "user_prompt": user_prompt, **kwargs})
        if self.error is not None:
            raise self.error
        return {"content": self.content, "finish_reason": self.finish_reason, "usage": {}}


class StubWeatherService(WeatherService):
    """Погода без похода в сеть."""

    def __init__(self, weather=None):
        super().__init__()
        self.weather = weather or {
            "temperature": 18,
            "condition": "Partly cloudy",
            "wind_speed": 4,
            "wind_direction": 270,
            "is_day": True,
        }

    async def get_current_weather(self, latitude, longitude):
        return dict(self.weather)


@pytest.fixture
def db():
    database = Database("sqlite://")
    database.create_schema()
    return database


@pytest.fixture
def session(db):
    with db.get_session() as s:
        yield s


@pytest.fixture
def failing_llm():
    return StubLLMClient(error=LLMRequestError("HTTP 503", status=503))


@pytest.fixture
def client(db, failing_llm):
    app = create_app(
        db=db,
        walk_sessions_manager=WalkSessionManager(tick_seconds=60),
        weather_service=StubWeatherService(),
        recommendation_service=WalkRecommendationService(llm_client=failing_llm),
    )
    with TestClient(app) as test_client:
        yield test_client
