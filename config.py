"""应用配置模块

提供不同环境的配置类，支持通过环境变量覆盖默认值。
"""

import json
import os


def _parse_hobbies(raw: str | None, default: dict[int, str]) -> dict[int, str]:
    """HOBBIES 环境变量为 JSON 对象，如 {"1": "Reading", "2": "Music"}"""
    if not raw:
        return dict(default)
    return {int(k): str(v) for k, v in json.loads(raw).items()}


class SqlConfig:
    SQLNAME='members'
    SQLURL='127.0.0.1'
    SQLPORT='3306'
    SQLUSER='root'

class HobbyConfig:
    # 趣味目录：id -> 显示名称，id 从 1 开始
    HOBBIES = {
        1: "Reading",
        2: "Music",
        3: "Sports",
        4: "Travel",
        5: "Cooking",
    }

# 统一的 AppConfig 和 get_config
class AppConfig(SqlConfig, HobbyConfig):
    # 允许通过环境变量覆盖
    SQLNAME = os.getenv("SQLNAME", SqlConfig.SQLNAME)
    SQLURL = os.getenv("SQLURL", SqlConfig.SQLURL)
    SQLPORT = os.getenv("SQLPORT", SqlConfig.SQLPORT)
    SQLUSER = os.getenv("SQLUSER", SqlConfig.SQLUSER)
    HOBBIES = _parse_hobbies(os.getenv("HOBBIES"), HobbyConfig.HOBBIES)

    # 默认使用本地 MySQL（root 无密码），DATABASE_URL 优先
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL",
        f"mysql+pymysql://{SQLUSER}@{SQLURL}:{SQLPORT}/{SQLNAME}?charset=utf8mb4",
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv("SECRET_KEY", "dev")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    # 覆盖默认错误提示文案，例如 {"required": "この項目は必須です。"}
    ERROR_MESSAGES: dict[str, str] = {}


class TestConfig(AppConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    LOG_LEVEL = "DEBUG"


def get_config(env: str | None = None):
    """
    返回用于 Flask app.config.from_object 的配置类。
    env 为 "testing"/"test" 时使用内存 SQLite。
    """
    if env in ("testing", "test"):
        return TestConfig
    return AppConfig
