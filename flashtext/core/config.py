# 读取 .env / 环境变量配置（前缀 FLASHTEXT_）
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    # Matching defaults
    CASE_SENSITIVE: bool = False
    FOLD_UPPER: bool = False
    LONGEST_MATCH: bool = True
    EXTRA_BOUNDARY_CHARS: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""

    model_config = SettingsConfigDict(
        env_prefix="FLASHTEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore" # 忽略多余的环境变量
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            supported = ", ".join(sorted(_LOG_LEVELS))
            raise ValueError(f"不支持的 LOG_LEVEL: {value}（可选：{supported}）")
        return level

settings = Settings()
