"""
测试配置文件
提供测试所需的fixtures
"""

import httpx
import pytest

from ..core import http as http_module
from ..core.http import HttpTransport
from .utils.fake_backend import FakeStore, create_fake_backend
from .utils.mock_transport import RecordingTransport


@pytest.fixture(autouse=True)
def reset_default_transport():
    """每个测试前后清除默认传输实例"""
    http_module.reset_http()
    yield
    http_module.reset_http()


@pytest.fixture
def mock_transport():
    """记录调用的Mock传输层"""
    return RecordingTransport()


@pytest.fixture
def store():
    """内存后端数据"""
    return FakeStore()


@pytest.fixture
def sample_category(store):
    """示例分类"""
    return store.add_category("热菜")


@pytest.fixture
def sample_dish(store, sample_category):
    """示例餐品"""
    return store.add_dish({
        "name": "宫保鸡丁",
        "categoryId": sample_category["id"],
        "price": 28.0,
        "image": "kungpao.png",
        "description": "经典川菜",
        "status": 1,
        "saleNum": 120,
    })


@pytest.fixture
def make_transport(store):
    """创建连接内存后端的HttpTransport

    每个事件循环需要新的客户端，测试在协程内创建并关闭
    """
    def factory(envelope: bool = False, **kwargs) -> HttpTransport:
        app = create_fake_backend(store, envelope=envelope)
        kwargs.setdefault("access_token", "test-token")
        return HttpTransport(
            "http://testserver",
            api_prefix="",
            unwrap_envelope=envelope,
            transport=httpx.ASGITransport(app=app),
            **kwargs,
        )

    return factory
