"""環境変数からの設定読み込み。

起動時に1回だけ読む。実行中に値を切り替えることはない。
"""

import os
from dataclasses import dataclass

REPOSITORY_INMEMORY = "inmemory"
REPOSITORY_SQLITE = "sqlite"
DEFAULT_DATABASE_PATH = "./quotes.db"
DEFAULT_PORT = 8000


class ConfigError(ValueError):
    """設定値が不正。"""


@dataclass(frozen=True)
class Settings:
    """アプリケーション設定。"""

    repository_type: str = REPOSITORY_INMEMORY
    database_path: str = ""
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def load_settings() -> Settings:
    """環境変数から Settings を構築する。

    - REPOSITORY_TYPE: ``inmemory``（既定）または ``sqlite``
    - DATABASE_PATH: sqlite 時のみ使用。省略時は ``./quotes.db``
    - PORT: 待ち受けポート（既定 8000）
    - LOG_LEVEL: ルートロガーのレベル（既定 INFO）

    Raises:
        ConfigError: REPOSITORY_TYPE または PORT が不正な場合
    """
    repository_type = os.getenv("REPOSITORY_TYPE") or REPOSITORY_INMEMORY
    if repository_type not in (REPOSITORY_INMEMORY, REPOSITORY_SQLITE):
        raise ConfigError(
            f"unknown repository type: {repository_type}."
            " Use 'inmemory' or 'sqlite'."
        )

    database_path = ""
    if repository_type == REPOSITORY_SQLITE:
        database_path = os.getenv("DATABASE_PATH") or DEFAULT_DATABASE_PATH

    raw_port = os.getenv("PORT") or str(DEFAULT_PORT)
    try:
        port = int(raw_port)
    except ValueError as exc:
        raise ConfigError(f"invalid port: {raw_port}") from exc

    return Settings(
        repository_type=repository_type,
        database_path=database_path,
        port=port,
        log_level=os.getenv("LOG_LEVEL") or "INFO",
    )
