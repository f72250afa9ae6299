from collections.abc import Callable

from sqlalchemy import types
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass


class Base(MappedAsDataclass, DeclarativeBase):
    """Base class for all models.

    The type map is overriden so that plain annotations map to portable types (see https://docs.sqlalchemy.org/en/20/orm/declarative_tables.html#customizing-the-type-map)"""

    type_annotation_map = {
        bool: types.Boolean(),
        int: types.Integer(),
        str: types.String(),
    }


SessionLocalType = Callable[[], AsyncSession]

# Range of `Integer` columns on every supported database (PostgreSQL `INTEGER` is 32 bits)
SQL_INTEGER_MIN = -(2**31)
SQL_INTEGER_MAX = 2**31 - 1
# Largest value accepted by `OFFSET` and `LIMIT` (64 bits)
SQL_BIGINT_MAX = 2**63 - 1
