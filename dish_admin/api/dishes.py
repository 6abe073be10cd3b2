"""
餐品管理API
每个函数对应一个后端接口，只拼装 方法 + 路径 + 参数 后交给传输层，
不做校验、缓存和重试，传输层抛出的异常原样向上传递
"""

from typing import Any, List, Mapping, Optional, Union

from ..core.http import Transport, get_http
from ..models.base import BaseEntity
from ..models.dish import (
    CategoryPayload,
    Dish,
    DishCategory,
    DishCreate,
    DishListResponse,
    DishQueryParams,
    DishUpdate,
    OperationResult,
)


def _payload(data: Union[BaseEntity, Mapping[str, Any]]) -> dict:
    """模型按驼峰字段名导出已设置的字段，字典原样转发"""
    if isinstance(data, BaseEntity):
        return data.to_payload()
    return dict(data)


def _transport(transport: Optional[Transport]) -> Transport:
    return transport if transport is not None else get_http()


# 获取餐品列表
async def get_dish_list(
    params: Union[DishQueryParams, Mapping[str, Any]],
    *,
    transport: Optional[Transport] = None,
) -> DishListResponse:
    return await _transport(transport).request(
        "get", "/dishes", params=_payload(params), response_model=DishListResponse
    )


# 获取餐品详情
async def get_dish_detail(id: int, *, transport: Optional[Transport] = None) -> Dish:
    return await _transport(transport).request(
        "get", f"/dishes/{id}", response_model=Dish
    )


# 添加餐品
async def add_dish(
    data: Union[DishCreate, Mapping[str, Any]],
    *,
    transport: Optional[Transport] = None,
) -> Dish:
    return await _transport(transport).request(
        "post", "/dishes", data=_payload(data), response_model=Dish
    )


# 更新餐品
async def update_dish(
    id: int,
    data: Union[DishUpdate, Mapping[str, Any]],
    *,
    transport: Optional[Transport] = None,
) -> Dish:
    return await _transport(transport).request(
        "put", f"/dishes/{id}", data=_payload(data), response_model=Dish
    )


# 删除餐品
async def delete_dish(id: int, *, transport: Optional[Transport] = None) -> OperationResult:
    return await _transport(transport).request(
        "delete", f"/dishes/{id}", response_model=OperationResult
    )


# 修改餐品状态
async def change_dish_status(
    id: int, status: int, *, transport: Optional[Transport] = None
) -> OperationResult:
    return await _transport(transport).request(
        "patch", f"/dishes/{id}/status", data={"status": status}, response_model=OperationResult
    )


# 获取餐品分类列表
async def get_dish_categories(*, transport: Optional[Transport] = None) -> List[DishCategory]:
    return await _transport(transport).request(
        "get", "/dish-categories", response_model=List[DishCategory]
    )


# 添加餐品分类
async def add_dish_category(
    data: Union[CategoryPayload, Mapping[str, Any]],
    *,
    transport: Optional[Transport] = None,
) -> DishCategory:
    return await _transport(transport).request(
        "post", "/dish-categories", data=_payload(data), response_model=DishCategory
    )


# 更新餐品分类
async def update_dish_category(
    id: int,
    data: Union[CategoryPayload, Mapping[str, Any]],
    *,
    transport: Optional[Transport] = None,
) -> DishCategory:
    return await _transport(transport).request(
        "put", f"/dish-categories/{id}", data=_payload(data), response_model=DishCategory
    )


# 删除餐品分类
async def delete_dish_category(id: int, *, transport: Optional[Transport] = None) -> OperationResult:
    return await _transport(transport).request(
        "delete", f"/dish-categories/{id}", response_model=OperationResult
    )


# 与后端接口命名一致的别名
getDishList = get_dish_list
getDishDetail = get_dish_detail
addDish = add_dish
updateDish = update_dish
deleteDish = delete_dish
changeDishStatus = change_dish_status
getDishCategories = get_dish_categories
addDishCategory = add_dish_category
updateDishCategory = update_dish_category
deleteDishCategory = delete_dish_category
