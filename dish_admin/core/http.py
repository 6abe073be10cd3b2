"""
HTTP传输层
封装httpx异步客户端，为API函数提供统一的 request(method, path, options) 调用接口

API函数只负责拼装 方法 + 路径 + 参数，错误分类全部在这里完成：
- NetworkError: 连接失败、超时
- HTTPStatusError: 非2xx响应
- ResponseDecodeError: 响应不是JSON或结构不匹配
- BackendError: 包装格式中 success=false
"""

import asyncio
import logging
import time
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from ..config.settings import Settings, settings as default_settings
from ..schemas.common import ApiResponse
from .exceptions import (
    BackendError,
    HTTPStatusError,
    NetworkError,
    ResponseDecodeError,
)

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """传输层接口，API函数只依赖这一个方法"""

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Any] = None,
        response_model: Any = None,
    ) -> Any:
        ...


@lru_cache(maxsize=None)
def _adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


class HttpTransport:
    """基于 httpx.AsyncClient 的默认传输实现"""

    def __init__(
        self,
        base_url: str = None,
        *,
        api_prefix: str = None,
        timeout: float = None,
        access_token: str = None,
        unwrap_envelope: bool = None,
        transport: httpx.AsyncBaseTransport = None,
        settings: Settings = None,
    ):
        """初始化传输层，未显式传入的参数从配置读取"""
        cfg = settings or default_settings

        self.base_url = (base_url or cfg.base_url).rstrip("/")
        self.api_prefix = cfg.api_prefix if api_prefix is None else api_prefix
        self.timeout = cfg.timeout if timeout is None else timeout
        self.access_token = cfg.access_token if access_token is None else access_token
        self.unwrap_envelope = cfg.unwrap_envelope if unwrap_envelope is None else unwrap_envelope

        # 测试时可注入 httpx.ASGITransport / MockTransport
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._client_loop: Optional[asyncio.AbstractEventLoop] = None

        # 请求计数和时间统计
        self.request_count = 0
        self.total_time = 0.0

    @property
    def root_url(self) -> str:
        """base_url 与 api_prefix 拼接后的根地址"""
        prefix = self.api_prefix.strip("/")
        return f"{self.base_url}/{prefix}" if prefix else self.base_url

    def _get_client(self) -> httpx.AsyncClient:
        # 连接池绑定创建它的事件循环，换了循环就重建客户端
        loop = asyncio.get_running_loop()
        if self._client is None or self._client.is_closed or self._client_loop is not loop:
            self._client_loop = loop
            self._client = httpx.AsyncClient(
                base_url=self.root_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    def _relative_path(self, path: str) -> str:
        if path.startswith("http") or path.startswith("/"):
            return path
        return "/" + path

    def _build_url(self, path: str) -> str:
        """完整地址，用于日志和错误信息"""
        path = self._relative_path(path)
        if path.startswith("http"):
            return path
        return self.root_url + path

    def _build_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Any] = None,
        response_model: Any = None,
    ) -> Any:
        """发送请求并返回解析后的响应"""
        method = method.upper()
        url = self._build_url(path)

        # 未设置的筛选条件不出现在查询串中
        query = None
        if params:
            query = {key: value for key, value in params.items() if value is not None}

        start_time = time.perf_counter()
        try:
            response = await self._get_client().request(
                method,
                self._relative_path(path),
                params=query,
                json=data,
                headers=self._build_headers(),
            )
        except httpx.HTTPError as e:
            elapsed = time.perf_counter() - start_time
            logger.warning("%s %s failed after %.2fs: %s", method, url, elapsed, e)
            raise NetworkError(
                f"Request failed: {method} {url} - {e} (took {elapsed:.2f}s)",
                details={"method": method, "url": url},
            ) from e

        elapsed = time.perf_counter() - start_time
        self.request_count += 1
        self.total_time += elapsed
        logger.debug("%s %s -> %s (%.3fs)", method, url, response.status_code, elapsed)

        payload = self._parse_response(response, method, url)
        return self._decode(payload, response_model, method, url)

    def _parse_response(self, response: httpx.Response, method: str, url: str) -> Any:
        """解析HTTP响应体，处理错误响应"""
        try:
            payload = response.json() if response.content else None
        except ValueError as e:
            if response.is_success:
                raise ResponseDecodeError(
                    f"{method} {url} returned a non-JSON body",
                    details={"status_code": response.status_code, "body": response.content[:200].decode("utf-8", "replace")},
                ) from e
            payload = response.content.decode("utf-8", "replace")

        if not response.is_success:
            error_msg = f"{method} {url} failed with status {response.status_code}"

            if isinstance(payload, dict):
                error_detail = payload.get("detail") or payload.get("message") or "Unknown error"
                error_msg += f": {error_detail}"
            elif payload:
                error_msg += f": {str(payload)[:200]}"

            logger.warning(error_msg)
            raise HTTPStatusError(
                error_msg,
                status_code=response.status_code,
                payload=payload,
                details={"method": method, "url": url},
            )

        if self.unwrap_envelope and ApiResponse.looks_like(payload):
            envelope = ApiResponse.model_validate(payload)
            if not envelope.success:
                logger.warning("%s %s rejected by backend: %s", method, url, envelope.message)
                raise BackendError(
                    envelope.message or f"{method} {url} was rejected",
                    error_code=envelope.error_code,
                    details=envelope.details,
                )
            payload = envelope.data

        return payload

    def _decode(self, payload: Any, response_model: Any, method: str, url: str) -> Any:
        """按声明的响应类型校验数据"""
        if response_model is None:
            return payload

        # 空响应体视为无字段的对象，如删除接口返回 204
        if payload is None:
            payload = {}

        try:
            return _adapter(response_model).validate_python(payload)
        except ValidationError as e:
            raise ResponseDecodeError(
                f"{method} {url} returned an unexpected payload: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e

    async def aclose(self):
        """关闭底层连接"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            self._client_loop = None

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def get_stats(self) -> Dict[str, Any]:
        """获取请求统计信息"""
        avg_time = self.total_time / self.request_count if self.request_count > 0 else 0

        return {
            "total_requests": self.request_count,
            "total_time": round(self.total_time, 2),
            "average_time": round(avg_time, 3),
            "base_url": self.root_url,
        }


# 进程级默认传输实例
_http: Optional[Transport] = None


def get_http() -> Transport:
    """获取默认传输实例，首次调用时按配置创建

    底层 AsyncClient 按事件循环创建，跨多次 asyncio.run 使用时会自动重建
    """
    global _http
    if _http is None:
        _http = HttpTransport()
    return _http


def set_http(transport: Optional[Transport]) -> Optional[Transport]:
    """替换默认传输实例，返回之前的实例"""
    global _http
    previous = _http
    _http = transport
    return previous


def reset_http():
    """清除默认传输实例，下次使用时重新创建"""
    set_http(None)
