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

"""Исключения для работы с профилями собак."""


class DogNotFound(Exception):
    """Собака не найдена."""

    def __init__(self, dog_id: str):
        self.dog_id = dog_id
        self.message = f"Dog with id={dog_id} not found"
        super().__init__(self.message)


class DogValidationError(Exception):
    """Некорректные данные профиля собаки."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
