"""
@File       : query_builder.py
@Description: 搜索过滤条件 <-> filters 查询参数

@Time       : 2026/1/6 13:05
@Author     : hcy18
"""
from typing import Iterable, List
from urllib.parse import quote, unquote

from rbs_client.schemas.filter_schema import Filter, FilterOperator, FilterScalar

FILTER_DELIMITER = ";"
VALUE_DELIMITER = ","
ESCAPE_CHAR = "\\"

OPERATOR_SYMBOLS = {
    FilterOperator.EQUAL: ":",
    FilterOperator.NOT_EQUAL: "!:",
    FilterOperator.GREATER_THAN: ">",
    FilterOperator.GREATER_THAN_OR_EQUAL: ">:",
    FilterOperator.LESS_THAN: "<",
    FilterOperator.LESS_THAN_OR_EQUAL: "<:",
    FilterOperator.IN: "~",
    FilterOperator.RANGE: "<>",
}
SYMBOL_OPERATORS = {symbol: operator for operator, symbol in OPERATOR_SYMBOLS.items()}

OPERATOR_CHARS = frozenset("".join(OPERATOR_SYMBOLS.values()))
RESERVED_CHARS = OPERATOR_CHARS | {ESCAPE_CHAR, FILTER_DELIMITER, VALUE_DELIMITER}


def _escape(text: str) -> str:
    return "".join(ESCAPE_CHAR + ch if ch in RESERVED_CHARS else ch for ch in text)


def _unescape(text: str) -> str:
    chars = []
    escaped = False
    for ch in text:
        if escaped:
            chars.append(ch)
            escaped = False
        elif ch == ESCAPE_CHAR:
            escaped = True
        else:
            chars.append(ch)
    if escaped:
        raise ValueError(f"Dangling escape in filter segment: {text!r}")
    return "".join(chars)


def _split_unescaped(text: str, delimiter: str) -> List[str]:
    """按未转义的分隔符切分，保留各段内的转义."""
    parts = []
    current = []
    escaped = False
    for ch in text:
        if escaped:
            current.append(ch)
            escaped = False
        elif ch == ESCAPE_CHAR:
            current.append(ch)
            escaped = True
        elif ch == delimiter:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def _render_scalar(value: FilterScalar) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class QueryBuilder:
    """
    filters 查询参数的编解码.

    编码规则：
    - 单个条件为 <field><symbol><value>，多值操作符的值用 ',' 连接
    - 条件之间用 ';' 连接
    - field 与 value 中的保留字符（'\\' ';' ',' ':' '!' '<' '>' '~'）前加 '\\'
    - 整体做百分号编码，可直接拼接进 URL
    """

    @staticmethod
    def filter_to_token(search_filter: Filter) -> str:
        """编码单个条件（未做百分号编码）."""
        symbol = OPERATOR_SYMBOLS.get(search_filter.operator)
        if symbol is None:
            raise ValueError(f"Unsupported filter operator: {search_filter.operator!r}")

        value = VALUE_DELIMITER.join(_escape(_render_scalar(v)) for v in search_filter.operands)
        return f"{_escape(search_filter.field)}{symbol}{value}"

    @staticmethod
    def filters_to_query_string(filters: Iterable[Filter]) -> str:
        """
        将过滤条件列表编码为 filters 参数值.

        Args:
            filters: 有序的过滤条件

        Returns:
            百分号编码后的字符串；空列表返回 ""
        """
        joined = FILTER_DELIMITER.join(QueryBuilder.filter_to_token(f) for f in filters)
        return quote(joined, safe="")

    @staticmethod
    def query_string_to_filters(query: str) -> List[Filter]:
        """
        filters_to_query_string 的逆操作，与搜索后端的解析规则一致.

        解码后的值均为字符串。
        """
        if not query:
            return []
        return [QueryBuilder._parse_token(token) for token in _split_unescaped(unquote(query), FILTER_DELIMITER)]

    @staticmethod
    def _parse_token(token: str) -> Filter:
        # 找到第一个未转义的操作符字符
        start = None
        i = 0
        while i < len(token):
            ch = token[i]
            if ch == ESCAPE_CHAR:
                i += 2
                continue
            if ch in OPERATOR_CHARS:
                start = i
                break
            i += 1
        if start is None:
            raise ValueError(f"No operator found in filter: {token!r}")

        end = start
        while end < len(token) and token[end] in OPERATOR_CHARS:
            end += 1

        symbol = token[start:end]
        operator = SYMBOL_OPERATORS.get(symbol)
        if operator is None:
            raise ValueError(f"Unknown filter operator symbol: {symbol!r}")

        field = _unescape(token[:start])
        raw_value = token[end:]
        if operator.is_multi_valued:
            value = tuple(_unescape(part) for part in _split_unescaped(raw_value, VALUE_DELIMITER))
        else:
            value = _unescape(raw_value)
        return Filter(field=field, operator=operator, value=value)
