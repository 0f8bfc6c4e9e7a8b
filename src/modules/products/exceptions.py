"""Product domain exceptions.

Raised at the input boundary when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from modules.products.validators import Violation


class ProductValidationError(Exception):
    """Create input failed one or more product rules.

    Carries every violation found, not only the first one.
    """

    def __init__(self, violations: List[Violation]) -> None:
        self.violations = list(violations)
        super().__init__("; ".join(v.message for v in self.violations))
