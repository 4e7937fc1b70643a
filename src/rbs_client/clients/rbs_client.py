"""
@File       : rbs_client.py
@Description: Client for calling RBS product / search / stock / token APIs

@Time       : 2026/1/6 15:20
@Author     : hcy18
"""
from enum import Enum
from typing import Any, Awaitable, Dict, Iterable, List, Optional, Sequence, Tuple, Union
from urllib.parse import quote

import httpx

from rbs_client.clients.envelope import ResponseDialect, unwrap_envelope, unwrap_status
from rbs_client.config.settings import RBSConfig
from rbs_client.exceptions import ConfigurationError, RBSError
from rbs_client.middleware.logging_observer import (
    LoggingObserver,
    RequestObserver,
    build_event_hooks,
    redact_url,
)
from rbs_client.schemas.product_schema import CategoryTree, Product, ProductList
from rbs_client.schemas.search_schema import DEFAULT_CULTURE, SearchInput, SearchResult
from rbs_client.schemas.stock_schema import (
    BulkUpdateItem,
    SingleMerchantProductStock,
    StockOperation,
    StockOperationData,
    StockOperationRequest,
    StockOperationResult,
)
from rbs_client.schemas.token_schema import ClientAuthenticateResponse, CustomToken, RbsTokenPayload
from rbs_client.services.query_builder import QueryBuilder
from rbs_client.utils.logger import app_logger as logger
from rbs_client.utils.token import decode_token_payload
from rbs_client.utils.trace_context import TRACE_ID_HEADER, get_trace_id

PRODUCT_SERVICE = "/ProductService2"
MAIN_SERVICE = "/MainService"
SEARCH_ENDPOINT = f"{PRODUCT_SERVICE}/search"
AGGS_ENDPOINT = f"{PRODUCT_SERVICE}/aggs"
PRODUCT_ID_DELIMITER = "|"


def _encode_value(value: Any) -> str:
    """单个查询参数值的编码."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe="")


def _query(params: Sequence[Tuple[str, Any]]) -> str:
    """按给定顺序拼接查询串."""
    return "&".join(f"{key}={_encode_value(value)}" for key, value in params)


class RBSClient:
    """
    RBS 服务客户端.

    公开方法同步完成参数校验与请求构建（前置条件不满足时直接抛出 ConfigurationError），
    返回的 awaitable 只发起一次 HTTP 调用。客户端本身不持有可变状态，可并发调用。
    """

    def __init__(
        self,
        config: RBSConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        observer: Optional[RequestObserver] = None,
    ):
        self.config = config
        self._base_url = config.base_url
        if observer is None and config.enable_logs:
            observer = LoggingObserver()
        self._observer = observer
        # 所有调用共用一个连接池，由客户端负责关闭
        self._http_client = httpx.AsyncClient(
            transport=transport,
            timeout=config.timeout,
            follow_redirects=True,
            event_hooks=build_event_hooks(observer),
        )

    async def aclose(self) -> None:
        """关闭底层连接池（包括注入的 transport）."""
        await self._http_client.aclose()

    async def __aenter__(self) -> "RBSClient":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()

    # ==================== 内部方法 ====================

    def _get_headers(self) -> Dict[str, str]:
        """获取带 Trace ID 的请求头."""
        return {
            TRACE_ID_HEADER: get_trace_id(),
            "Content-Type": "application/json",
        }

    def _url(self, path: str, params: Sequence[Tuple[str, Any]] = ()) -> str:
        url = f"{self._base_url}{path}"
        query = _query(params)
        return f"{url}?{query}" if query else url

    def _add_api_key(self, url: str) -> str:
        """附加 auth 参数（未配置 api_key 时原样返回）."""
        if not self.config.api_key:
            return url
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}auth={_encode_value(self.config.api_key)}"

    async def _request(
        self,
        method: str,
        url: str,
        data_type: Any,
        dialect: ResponseDialect = ResponseDialect.ENVELOPE,
        json_body: Any = None,
    ) -> Any:
        """
        发起一次请求并按 dialect 解析响应.

        Args:
            method: HTTP 方法
            url: 完整 URL（已包含查询参数）
            data_type: 结果类型
            dialect: 响应格式
            json_body: POST 请求体

        Returns:
            解析后的结果
        """
        safe_url = redact_url(httpx.URL(url))
        logger.info(f"调用 RBS 服务: method={method}, url={safe_url}")

        try:
            response = await self._http_client.request(method, url, json=json_body, headers=self._get_headers())

            if dialect is ResponseDialect.STATUS:
                result = unwrap_status(response, data_type)
            else:
                result = unwrap_envelope(response, data_type)

            logger.info(f"调用 RBS 服务成功: url={safe_url}, status={response.status_code}")
            return result
        except httpx.TimeoutException:
            logger.error(f"调用 RBS 服务超时: url={safe_url}")
            raise
        except RBSError as e:
            logger.error(f"RBS 服务返回失败: url={safe_url}, error={str(e)}")
            raise
        except Exception as e:
            logger.error(f"调用 RBS 服务异常: url={safe_url}, error={str(e)}", exc_info=True)
            raise

    # ==================== 搜索 ====================

    def search(self, search_input: Optional[SearchInput] = None) -> Awaitable[SearchResult]:
        """
        商品搜索.

        aggs=True 时请求聚合接口；filters 为空时不发送该参数。

        Args:
            search_input: 搜索参数，user_id 必填

        Returns:
            SearchResult
        """
        if search_input is None or not search_input.user_id:
            raise ConfigurationError("UserId is missing")

        filters_value = QueryBuilder.filters_to_query_string(search_input.filters)
        endpoint = AGGS_ENDPOINT if search_input.aggs else SEARCH_ENDPOINT

        params: List[Tuple[str, Any]] = [
            ("categoryId", search_input.category_id),
            ("culture", search_input.culture),
            ("from", search_input.from_),
            ("size", search_input.size),
            ("userId", search_input.user_id),
            ("sortBy", search_input.sort_attribute),
            ("sortOrder", search_input.sort_order),
        ]
        if search_input.in_stock:
            params.append(("inStock", search_input.in_stock))
        if search_input.search_term:
            params.append(("searchTerm", search_input.search_term))

        query = _query(params)
        # filters 已编码，原样拼接
        if filters_value:
            query = f"filters={filters_value}&{query}"
        url = f"{self._base_url}{endpoint}?{query}"

        return self._request("GET", self._add_api_key(url), SearchResult)

    # ==================== 库存 ====================

    def execute_stock_operation(
        self,
        operations: Iterable[StockOperation],
        decrease: bool = False,
        simulated: bool = False,
    ) -> Awaitable[StockOperationResult]:
        """
        执行库存操作.

        Args:
            operations: 库存操作列表
            decrease: True 为扣减库存
            simulated: True 时只做模拟（simulatedStockOperation），不落库

        Returns:
            StockOperationResult
        """
        merchant_id = self.config.merchant_id
        if not merchant_id:
            raise ConfigurationError("MerchantId should be set in constructor.")

        request_body = StockOperationRequest(
            decrease=decrease,
            data=[StockOperationData.from_operation(merchant_id, o) for o in operations],
        )
        path = "simulatedStockOperation" if simulated else "insertStockOperation"
        url = self._url(f"{PRODUCT_SERVICE}/{path}")

        return self._request(
            "POST",
            self._add_api_key(url),
            StockOperationResult,
            json_body=request_body.model_dump(mode="json", by_alias=True),
        )

    def update_merchant_data(self, items: Iterable[BulkUpdateItem]) -> Awaitable[bool]:
        """
        商家数据批量更新.

        Args:
            items: 更新条目

        Returns:
            是否成功
        """
        url = self._url(f"{PRODUCT_SERVICE}/updateMerchantData")
        body = [item.model_dump(mode="json", by_alias=True, exclude_none=True) for item in items]
        return self._request("POST", self._add_api_key(url), bool, json_body=body)

    def get_product_stock(self, product_id: str, merchant_id: str, variant: str) -> Awaitable[SingleMerchantProductStock]:
        """获取单商家单规格库存."""
        url = self._url(
            f"{PRODUCT_SERVICE}/getProductStock",
            [("productId", product_id), ("merchantId", merchant_id), ("variant", variant)],
        )
        return self._request("GET", self._add_api_key(url), SingleMerchantProductStock)

    def get_product_stock_by_merchant(self, merchant_id: str, variant: str) -> Awaitable[List[SingleMerchantProductStock]]:
        """获取某商家某规格下的全部商品库存."""
        url = self._url(
            f"{PRODUCT_SERVICE}/getProductStockByMerchant",
            [("merchantId", merchant_id), ("variant", variant)],
        )
        return self._request("GET", self._add_api_key(url), List[SingleMerchantProductStock])

    # ==================== 商品 / 分类 / 列表 ====================

    def get_product(
        self,
        product_id: str,
        culture: str = DEFAULT_CULTURE,
        merchant_id: Optional[str] = None,
    ) -> Awaitable[Product]:
        """
        获取商品详情.

        Args:
            product_id: 商品ID
            culture: 语言
            merchant_id: 只返回该商家的信息（可选）

        Returns:
            Product
        """
        params: List[Tuple[str, Any]] = [("productId", product_id), ("culture", culture)]
        if merchant_id:
            params.append(("merchantId", merchant_id))
        url = self._url(f"{PRODUCT_SERVICE}/getProduct", params)
        return self._request("GET", self._add_api_key(url), Product)

    def get_multiple_products(self, product_ids: Iterable[str], culture: str = DEFAULT_CULTURE) -> Awaitable[List[Product]]:
        """
        批量获取商品，商品ID以 '|' 连接后编码.

        Args:
            product_ids: 商品ID列表
            culture: 语言

        Returns:
            商品列表
        """
        url = self._url(
            f"{PRODUCT_SERVICE}/getMultipleProducts",
            [("productIds", PRODUCT_ID_DELIMITER.join(product_ids)), ("culture", culture)],
        )
        return self._request("GET", self._add_api_key(url), List[Product])

    def get_categories(self, culture: str = DEFAULT_CULTURE) -> Awaitable[CategoryTree]:
        """获取分类树."""
        url = self._url(f"{PRODUCT_SERVICE}/getCategories", [("culture", culture)])
        return self._request("GET", self._add_api_key(url), CategoryTree)

    def get_list_products(
        self,
        list_id: str,
        culture: str = DEFAULT_CULTURE,
        in_stock: bool = False,
    ) -> Awaitable[ProductList]:
        """获取商品列表（in_stock=True 时只返回有库存商品）."""
        params: List[Tuple[str, Any]] = [("culture", culture), ("listId", list_id)]
        if in_stock:
            params.append(("inStock", in_stock))
        url = self._url(f"{PRODUCT_SERVICE}/getList", params)
        return self._request("GET", self._add_api_key(url), ProductList)

    # ==================== 身份 / Token ====================

    def generate_custom_token(self, user_id: str) -> Awaitable[CustomToken]:
        """为用户签发自定义 token."""
        url = self._url(f"{MAIN_SERVICE}/token", [("userId", user_id)])
        return self._request("GET", self._add_api_key(url), CustomToken, dialect=ResponseDialect.STATUS)

    def client_authenticate(self, custom_token: Union[CustomToken, str]) -> Awaitable[ClientAuthenticateResponse]:
        """
        使用自定义 token 换取 access / refresh token（不附加 auth 参数）.

        Args:
            custom_token: generate_custom_token 的返回或 token 字符串

        Returns:
            ClientAuthenticateResponse
        """
        if isinstance(custom_token, str):
            custom_token = CustomToken(custom_token=custom_token)
        url = self._url(f"{MAIN_SERVICE}/public/authenticate")
        return self._request(
            "POST",
            url,
            ClientAuthenticateResponse,
            dialect=ResponseDialect.STATUS,
            json_body=custom_token.model_dump(mode="json", by_alias=True),
        )

    def client_refresh_token(self, refresh_token: str) -> Awaitable[ClientAuthenticateResponse]:
        """使用 refresh token 换取新的 token（不附加 auth 参数）."""
        url = self._url(f"{MAIN_SERVICE}/public/refresh-token")
        return self._request(
            "POST",
            url,
            ClientAuthenticateResponse,
            dialect=ResponseDialect.STATUS,
            json_body={"refreshToken": refresh_token},
        )

    @staticmethod
    def get_rbs_token_payload(token: str) -> RbsTokenPayload:
        """读取 token 声明（不校验签名）."""
        return decode_token_payload(token)


def create_rbs_client(
    config: Optional[RBSConfig] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    observer: Optional[RequestObserver] = None,
) -> RBSClient:
    """
    创建 RBS 客户端.

    Args:
        config: 客户端配置，为 None 时从环境变量读取
        transport: 自定义 httpx transport（测试时可传入 httpx.MockTransport）
        observer: 请求 / 响应观察者

    Returns:
        RBSClient 实例
    """
    return RBSClient(config or RBSConfig(), transport=transport, observer=observer)
