"""
@File       : filter_schema.py
@Description: ==================== 搜索过滤条件模型 ====================

@Time       : 2026/1/6 10:20
@Author     : hcy18
"""
from enum import Enum
from typing import Tuple, Union

from pydantic import ConfigDict, Field, model_validator

from rbs_client.schemas.base import CamelCaseModel

FilterScalar = Union[bool, int, float, str]
FilterValue = Union[FilterScalar, Tuple[FilterScalar, ...]]


class FilterOperator(str, Enum):
    """搜索后端支持的过滤操作符."""
    EQUAL = "EQUAL"
    NOT_EQUAL = "NOT_EQUAL"
    GREATER_THAN = "GREATER_THAN"
    GREATER_THAN_OR_EQUAL = "GREATER_THAN_OR_EQUAL"
    LESS_THAN = "LESS_THAN"
    LESS_THAN_OR_EQUAL = "LESS_THAN_OR_EQUAL"
    IN = "IN"
    RANGE = "RANGE"

    @property
    def is_multi_valued(self) -> bool:
        return self in (FilterOperator.IN, FilterOperator.RANGE)


class Filter(CamelCaseModel):
    """
    单个过滤条件，构造后不可变.

    单值操作符的 value 为标量；IN 至少一个值；RANGE 恰好两个值 (min, max)。
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    field: str = Field(..., min_length=1, description="字段标识")
    operator: FilterOperator = Field(..., description="操作符")
    value: FilterValue = Field(..., description="操作数，多值操作符为有序元组")

    @model_validator(mode="after")
    def check_arity(self) -> "Filter":
        """校验操作数个数与操作符匹配."""
        is_sequence = isinstance(self.value, tuple)
        if not self.operator.is_multi_valued:
            if is_sequence:
                raise ValueError(f"{self.operator.value} expects a single value")
            return self

        if not is_sequence:
            raise ValueError(f"{self.operator.value} expects a list of values")
        if self.operator is FilterOperator.RANGE and len(self.value) != 2:
            raise ValueError("RANGE expects exactly two values (min, max)")
        if self.operator is FilterOperator.IN and not self.value:
            raise ValueError("IN expects at least one value")
        return self

    @property
    def operands(self) -> Tuple[FilterScalar, ...]:
        """以元组形式返回操作数."""
        return self.value if isinstance(self.value, tuple) else (self.value,)
