"""
Схемы API для The Walking Dog.

Организованы по доменам для удобства навигации и поддержки.
Каждый модуль соответствует одному или группе связанных эндпоинтов.

Структура:
- common: Общие схемы, используемые в нескольких эндпоинтах
- dogs: Схемы для профилей собак
- walks: Схемы для журнала прогулок
- walk_sessions: Схемы для живого трекинга прогулки
- weather: Схемы для погоды
- recommendations: Схемы для AI-рекомендаций
- journal: Схемы для дневника и календаря
"""

# Common
from api.schemas.common import (
    GeoLocation,
    StatusResponse,
)

# Dogs
from api.schemas.dogs import (
    DogCreate,
    DogUpdate,
    DogResponse,
)

# Walks
from api.schemas.walks import (
    WalkCreate,
    WalkResponse,
    WalkDetailResponse,
)

# Walk sessions
from api.schemas.walk_sessions import (
    WalkSuggestion,
    WalkSessionStart,
    WalkLocationUpdate,
    WalkSessionState,
    WalkSessionFinished,
)

# Weather
from api.schemas.weather import (
    WalkingAdvice,
    WeatherInfo,
)

# Recommendations
from api.schemas.recommendations import (
    WeatherSnapshot,
    WalkRecommendationRequest,
    WalkRecommendationResponse,
)

# Journal
from api.schemas.journal import (
    JournalDay,
    CalendarDay,
    JournalCalendar,
    JournalSummary,
)

__all__ = [
    # Common
    "GeoLocation",
    "StatusResponse",
    # Dogs
    "DogCreate",
    "DogUpdate",
    "DogResponse",
    # Walks
    "WalkCreate",
    "WalkResponse",
    "WalkDetailResponse",
    # Walk sessions
    "WalkSuggestion",
    "WalkSessionStart",
    "WalkLocationUpdate",
    "WalkSessionState",
    "WalkSessionFinished",
    # Weather
    "WalkingAdvice",
    "WeatherInfo",
    # Recommendations
    "WeatherSnapshot",
    "WalkRecommendationRequest",
    "WalkRecommendationResponse",
    # Journal
    "JournalDay",
    "CalendarDay",
    "JournalCalendar",
    "JournalSummary",
]
