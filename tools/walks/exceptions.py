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

"""Исключения для журнала прогулок и трекинга."""


class WalkNotFound(Exception):
    """Прогулка не найдена."""

    def __init__(self, walk_id: str):
        self.walk_id = walk_id
        self.message = f"Walk with id={walk_id} not found"
        super().__init__(self.message)


class WalkValidationError(Exception):
    """Некорректная запись о прогулке."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class WalkSessionNotFound(Exception):
    """Активная сессия прогулки не найдена."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        self.message = f"Walk session {session_id} not found"
        super().__init__(self.message)


class WalkSessionStateError(Exception):
    """Операция недопустима в текущем состоянии прогулки."""

    def __init__(self, action: str, state: str):
        self.action = action
        self.state = state
        self.message = f"Cannot {action} walk in state '{state}'"
        super().__init__(self.message)


class NoLocationFix(Exception):
    """Нет ни одной GPS-точки, прогулку начать нельзя."""

    def __init__(self, message: str = "Current location is not available"):
        self.message = message
        super().__init__(self.message)
