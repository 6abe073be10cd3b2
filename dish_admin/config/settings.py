from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # 后端地址
    base_url: str = "http://localhost:3000"
    api_prefix: str = ""

    # 请求配置
    timeout: float = 10.0  # 秒
    access_token: Optional[str] = None

    # 后端是否使用 {success, data, message} 响应包装
    unwrap_envelope: bool = False

    class Config:
        env_prefix = "DISH_ADMIN_"
        env_file = ".env"
        case_sensitive = False

# 全局设置实例
settings = Settings()
