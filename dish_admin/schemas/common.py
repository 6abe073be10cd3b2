from typing import Any, Optional
from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """后端通用响应包装格式"""
    success: bool = Field(description="请求是否成功")
    data: Optional[Any] = Field(None, description="响应数据")
    message: Optional[str] = Field(None, description="响应消息")
    error_code: Optional[str] = Field(None, description="错误码")
    details: Optional[dict] = Field(None, description="错误详情")

    @classmethod
    def looks_like(cls, payload: Any) -> bool:
        """判断响应体是否为包装格式"""
        return isinstance(payload, dict) and "success" in payload and (
            "data" in payload or "message" in payload or "error_code" in payload
        )
