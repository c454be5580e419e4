# The Walking Dog - Walk Companion Backend
# Copyright (C) 2025-2026 Olga Kalinina

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.


"""Зависимости эндпоинтов: общие объекты из app.state"""

from fastapi import Request

def get_db(request: Request):
    return request.app.state.db

def get_walk_sessions(request: Request):
    return request.app.state.walk_sessions

def get_weather_service(request: Request):
    return request.app.state.weather_service

def get_recommendation_service(request: Request):
    return request.app.state.recommendation_service
