from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..core.enums import DepartmentName, ProductionCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlatDepartment:
    """Department without internal structure (administration, packing, ...)."""

    name: DepartmentName

    @property
    def key(self) -> str:
        return self.name.value


@dataclass(frozen=True)
class ProductionDepartment:
    """Production floor: optionally split by sub-department and master/operator category."""

    sub_department: Optional[str] = None
    category: Optional[ProductionCategory] = None

    @property
    def name(self) -> DepartmentName:
        return DepartmentName.PRODUCTION

    @property
    def key(self) -> str:
        parts = [DepartmentName.PRODUCTION.value]
        if self.sub_department or self.category:
            parts.append(self.sub_department or "")
        if self.category:
            parts.append(self.category.value)
        return ":".join(parts)


Department = Union[FlatDepartment, ProductionDepartment]

OTHERS = FlatDepartment(DepartmentName.OTHERS)


def parse_department(value: Union[str, DepartmentName, FlatDepartment, ProductionDepartment, None]) -> Department:
    """Resolve a stored department key (``production:cutting:master``) into a variant.

    Unknown names fall back to ``others``.
    """

    if isinstance(value, (FlatDepartment, ProductionDepartment)):
        return value
    if isinstance(value, DepartmentName):
        return ProductionDepartment() if value == DepartmentName.PRODUCTION else FlatDepartment(value)

    text = (value or "").strip().lower()
    if not text:
        return OTHERS

    head, _, rest = text.partition(":")
    try:
        name = DepartmentName(head)
    except ValueError:
        logger.warning("Unknown department %r, treating as %s", value, DepartmentName.OTHERS.value)
        return OTHERS

    if name != DepartmentName.PRODUCTION:
        return FlatDepartment(name)

    sub, _, cat = rest.partition(":")
    category = None
    if cat:
        try:
            category = ProductionCategory(cat)
        except ValueError:
            logger.warning("Unknown production category %r in %r", cat, value)
    return ProductionDepartment(sub_department=sub or None, category=category)


@dataclass(frozen=True)
class DepartmentSchedule:
    """Persisted department-level entry/exit override."""

    department: DepartmentName
    entry_minutes: int
    exit_minutes: int
