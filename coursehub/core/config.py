from pydantic_settings import BaseSettings
from enum import Enum


class Environment(str, Enum):

    """运行环境枚举"""
    TESTING = "testing"
    PRODUCTION = "production"


class Settings(BaseSettings):

    # 应用基础配置
    app_name: str = "CourseHub"
    app_version: str = "1.0.0"
    environment: Environment = Environment.TESTING
    debug: bool = True

    # 业务配置
    default_currency: str = "usd"
    seed_demo_data: bool = False  # 启动时是否写入演示课程数据

    # 日志配置
    log_level: str = "INFO"
    log_json: bool = False  # 生产环境建议输出JSON日志

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    class Config:
        env_file = ".env"
        env_prefix = "COURSEHUB_"
        case_sensitive = False


# 全局配置实例
settings = Settings()
