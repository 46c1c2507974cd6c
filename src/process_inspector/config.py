"""
检查器配置
"""
import os
from dataclasses import dataclass


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class InspectorSettings:
    """检查器配置项"""
    database_url: str = "sqlite:///process_engine.db"
    base_indent: int = 0
    indent_step: int = 4
    strict: bool = False
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False

    @classmethod
    def from_env(cls) -> 'InspectorSettings':
        """从环境变量读取配置（需先调用 load_dotenv 才会包含 .env 中的值）"""
        return cls(
            database_url=os.getenv("INSPECTOR_DATABASE_URL", cls.database_url),
            base_indent=int(os.getenv("INSPECTOR_BASE_INDENT", str(cls.base_indent))),
            indent_step=int(os.getenv("INSPECTOR_INDENT_STEP", str(cls.indent_step))),
            strict=_env_bool("INSPECTOR_STRICT", "false"),
            log_level=os.getenv("INSPECTOR_LOG_LEVEL", cls.log_level).upper(),
            api_host=os.getenv("API_HOST", cls.api_host),
            api_port=int(os.getenv("API_PORT", str(cls.api_port))),
            api_reload=_env_bool("API_RELOAD", "false")
        )
