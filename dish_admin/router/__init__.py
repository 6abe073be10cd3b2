"""
菜单路由
汇总 modules 下的路由模块，按 rank 排序后交给外部路由系统
"""

from .modules.dishes import dishes
from .types import (
    LazyComponent,
    RouteConfig,
    RouteMeta,
    ascending,
    find_route,
    flatten_routes,
    walk,
)

routes = ascending([dishes])

__all__ = [
    "LazyComponent",
    "RouteConfig",
    "RouteMeta",
    "ascending",
    "find_route",
    "flatten_routes",
    "walk",
    "routes",
]
