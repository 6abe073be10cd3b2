"""
基础数据模型
定义通用的模型基类和常用字段
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional, Union


class BaseEntity(BaseModel):
    """基础实体模型，对外使用后端的驼峰字段名"""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
        "use_enum_values": True,
    }

    def to_payload(self) -> dict:
        """转换为请求体，只包含显式设置过的字段"""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class TimestampMixin(BaseModel):
    """时间戳混入类"""
    create_time: Optional[Union[datetime, str]] = None
    update_time: Optional[Union[datetime, str]] = None
