from typing import List

from api.schemas.walks import WalkDetailResponse, WalkResponse
from tools.walks.formatting import format_distance, format_duration
from tools.walks.models import WalkEntry


def to_walk_response(walk: WalkEntry) -> WalkResponse:
    response = WalkResponse.model_validate(walk)
    response.distance_text = format_distance(walk.distance)
    response.duration_text = format_duration(walk.duration)
    return response


def to_walk_responses(walks: List[WalkEntry]) -> List[WalkResponse]:
    return [to_walk_response(w) for w in walks]


def to_walk_detail(walk: WalkEntry) -> WalkDetailResponse:
    response = WalkDetailResponse.model_validate(walk)
    response.distance_text = format_distance(walk.distance)
    response.duration_text = format_duration(walk.duration)
    return response
