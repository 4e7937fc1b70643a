"""Async client SDK for the RBS product / search / stock / token services."""

from rbs_client.clients.envelope import ResponseDialect, unwrap_envelope, unwrap_status
from rbs_client.clients.rbs_client import RBSClient, create_rbs_client
from rbs_client.config.settings import RBSConfig
from rbs_client.exceptions import (
    BackendRejection,
    ConfigurationError,
    MalformedResponseError,
    RBSError,
)
from rbs_client.middleware.logging_observer import LoggingObserver, RequestObserver
from rbs_client.schemas.filter_schema import Filter, FilterOperator
from rbs_client.schemas.product_schema import Category, CategoryTree, Product, ProductList, ProductVariant
from rbs_client.schemas.search_schema import SearchInput, SearchResult, SortOrder
from rbs_client.schemas.service_response import ServiceResponse
from rbs_client.schemas.stock_schema import (
    BulkUpdateItem,
    SingleMerchantProductStock,
    StockOperation,
    StockOperationResult,
    StockOperationStockItem,
)
from rbs_client.schemas.token_schema import ClientAuthenticateResponse, CustomToken, RbsTokenPayload
from rbs_client.services.query_builder import QueryBuilder
from rbs_client.utils.logger import setup_logging
from rbs_client.utils.token import decode_token_payload
from rbs_client.utils.trace_context import get_trace_id, set_trace_id

__all__ = [
    "BackendRejection",
    "BulkUpdateItem",
    "Category",
    "CategoryTree",
    "ClientAuthenticateResponse",
    "ConfigurationError",
    "CustomToken",
    "Filter",
    "FilterOperator",
    "LoggingObserver",
    "MalformedResponseError",
    "Product",
    "ProductList",
    "ProductVariant",
    "QueryBuilder",
    "RBSClient",
    "RBSConfig",
    "RBSError",
    "RbsTokenPayload",
    "RequestObserver",
    "ResponseDialect",
    "SearchInput",
    "SearchResult",
    "ServiceResponse",
    "SingleMerchantProductStock",
    "SortOrder",
    "StockOperation",
    "StockOperationResult",
    "StockOperationStockItem",
    "create_rbs_client",
    "decode_token_payload",
    "get_trace_id",
    "set_trace_id",
    "setup_logging",
    "unwrap_envelope",
    "unwrap_status",
]
