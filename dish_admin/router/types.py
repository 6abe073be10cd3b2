"""
路由配置数据模型
路由树是纯数据，由外部路由/菜单系统消费
"""

from typing import Any, Callable, Dict, Iterator, List, Optional
from pydantic import BaseModel, Field, PrivateAttr, model_validator


class RouteMeta(BaseModel):
    """菜单展示信息"""
    title: str = Field(..., description="菜单标题")
    icon: Optional[str] = Field(None, description="菜单图标")
    rank: Optional[int] = Field(None, description="菜单排序")


class LazyComponent(BaseModel):
    """懒加载的页面组件，首次导航时才解析"""
    path: str = Field(..., description="组件路径")

    _resolved: Any = PrivateAttr(default=None)
    _loaded: bool = PrivateAttr(default=False)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def resolve(self, loader: Callable[[str], Any]) -> Any:
        """用外部加载器解析组件，结果缓存，加载器只调用一次"""
        if not self._loaded:
            self._resolved = loader(self.path)
            self._loaded = True
        return self._resolved


class RouteConfig(BaseModel):
    """路由节点"""
    path: str = Field(..., description="路由路径")
    name: str = Field(..., description="路由名称")
    component: LazyComponent = Field(..., description="页面组件")
    redirect: Optional[str] = Field(None, description="重定向目标")
    meta: RouteMeta = Field(..., description="菜单信息")
    children: Optional[List["RouteConfig"]] = Field(None, description="子路由")

    @model_validator(mode="after")
    def validate_unique(self):
        """路由树内 path 和 name 必须唯一"""
        paths, names = set(), set()
        for route in walk(self):
            if route.path in paths:
                raise ValueError(f"路由路径重复: {route.path}")
            if route.name in names:
                raise ValueError(f"路由名称重复: {route.name}")
            paths.add(route.path)
            names.add(route.name)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """导出为纯数据"""
        return self.model_dump(exclude_none=True)


def walk(route: RouteConfig) -> Iterator[RouteConfig]:
    """深度优先遍历路由树"""
    yield route
    for child in route.children or []:
        yield from walk(child)


def flatten_routes(route: RouteConfig) -> List[RouteConfig]:
    return list(walk(route))


def find_route(route: RouteConfig, path: str) -> Optional[RouteConfig]:
    """按路径查找路由节点，不存在时返回 None"""
    for node in walk(route):
        if node.path == path:
            return node
    return None


def ascending(routes: List[RouteConfig]) -> List[RouteConfig]:
    """按 meta.rank 升序排列菜单，未设置 rank 的排在最后"""
    return sorted(
        routes,
        key=lambda route: (route.meta.rank is None, route.meta.rank or 0),
    )
