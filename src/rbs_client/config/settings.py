"""
@File       : settings.py
@Description:

@Time       : 2026/1/6 09:45
@Author     : hcy18
"""
"""RBS client configuration."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION_URL = "https://rbs.rettermobile.com"
TEST_URL = "https://rbsmaintest.rettermobile.com"


class RBSConfig(BaseSettings):
    """
    RBS 客户端配置，构造后不可变.

    可直接传参，也可从环境变量 / .env 读取（前缀 RBS_，如 RBS_API_KEY）。
    """

    model_config = SettingsConfigDict(
        env_prefix="RBS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    api_key: Optional[str] = Field(default=None, description="API key，以 auth 参数附加到请求")
    merchant_id: Optional[str] = Field(default=None, description="商家ID，库存写操作必填")
    service_url: Optional[str] = Field(default=None, description="显式指定的服务地址，优先级最高")
    enable_logs: bool = Field(default=False, description="是否记录请求 / 响应日志")
    test_env: bool = Field(default=False, description="是否使用测试环境")
    endpoint: Literal["server", "client"] = Field(..., description="服务端或客户端入口")

    # Environment defaults
    production_url: str = Field(default=PRODUCTION_URL, description="生产环境地址")
    test_url: str = Field(default=TEST_URL, description="测试环境地址")

    # Transport
    timeout: Optional[float] = Field(default=None, description="请求超时（秒），默认不限制")

    @property
    def base_url(self) -> str:
        """
        解析服务基础地址.

        service_url 优先；否则按 test_env 选择环境地址并追加 /<endpoint>。

        Returns:
            不以 '/' 结尾的基础地址
        """
        if self.service_url:
            return self.service_url.rstrip("/")
        host = self.test_url if self.test_env else self.production_url
        return f"{host.rstrip('/')}/{self.endpoint}"
