"""Input rules for product creation.

Every rule is evaluated and every violation is returned; nothing
short-circuits on the first failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from modules.products.dtos import CreateProductDTO
from modules.products.exceptions import ProductValidationError

NAME_MAX_LENGTH = 100


@dataclass(frozen=True)
class Violation:
    field: str
    message: str


def validate_create_product(dto: CreateProductDTO) -> List[Violation]:
    violations: List[Violation] = []

    if not dto.name or not dto.name.strip():
        violations.append(Violation("name", "name required"))
    elif len(dto.name) > NAME_MAX_LENGTH:
        violations.append(Violation("name", "name too long"))

    if dto.price <= 0:
        violations.append(Violation("price", "price must be positive"))

    if dto.stock < 0:
        violations.append(Violation("stock", "stock must be non-negative"))

    return violations


def ensure_valid_create_product(dto: CreateProductDTO) -> None:
    """Raise ``ProductValidationError`` if any rule fails."""
    violations = validate_create_product(dto)
    if violations:
        raise ProductValidationError(violations)
