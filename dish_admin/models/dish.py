"""
餐品相关数据模型
字段名与后端保持一致（驼峰），Python侧使用下划线命名
"""

from pydantic import Field
from enum import IntEnum
from typing import Optional, List
from .base import BaseEntity, TimestampMixin


class DishStatus(IntEnum):
    """餐品状态枚举，具体编码以后端为准"""
    INACTIVE = 0    # 下架
    ACTIVE = 1      # 上架


class DishCategory(BaseEntity, TimestampMixin):
    """餐品分类"""
    id: int = Field(..., description="分类ID")
    name: str = Field(..., description="分类名称")


class CategoryPayload(BaseEntity):
    """分类创建/更新请求体"""
    name: str = Field(..., description="分类名称")


class DishBase(BaseEntity):
    """餐品基础字段"""
    name: str = Field(..., description="餐品名称")
    category_id: int = Field(..., description="所属分类ID")
    price: float = Field(..., description="价格")
    image: str = Field(..., description="图片地址")
    description: str = Field(..., description="描述")
    status: int = Field(..., description="状态")
    sale_num: int = Field(..., description="销量")


class DishCreate(DishBase, TimestampMixin):
    """餐品创建模型（不含ID）"""
    pass


class DishUpdate(BaseEntity, TimestampMixin):
    """餐品更新模型，只发送显式设置的字段"""
    id: Optional[int] = None
    name: Optional[str] = None
    category_id: Optional[int] = None
    price: Optional[float] = None
    image: Optional[str] = None
    description: Optional[str] = None
    status: Optional[int] = None
    sale_num: Optional[int] = None


class Dish(DishBase, TimestampMixin):
    """餐品完整模型"""
    id: int = Field(..., description="餐品ID")

    @property
    def is_active(self) -> bool:
        """是否上架"""
        return self.status == DishStatus.ACTIVE


class DishQueryParams(BaseEntity):
    """餐品查询参数"""
    page: int = Field(..., ge=1, description="页码")
    page_size: int = Field(..., ge=1, description="每页数量")
    name: Optional[str] = Field(None, description="名称模糊匹配")
    category_id: Optional[int] = Field(None, description="分类筛选")
    status: Optional[int] = Field(None, description="状态筛选")


class DishListResponse(BaseEntity):
    """餐品列表响应"""
    list: List[Dish] = Field(..., description="当前页餐品")
    total: int = Field(..., description="总记录数")


class OperationResult(BaseEntity):
    """删除、状态修改等操作的结果"""
    success: bool = Field(True, description="是否成功")
    message: Optional[str] = Field(None, description="结果消息")
