"""DI用ファクトリ関数。

quotebox/ 直下に配置することで、api/ や service/ から store/ への
直接依存を避けつつ、FastAPI の Depends() で注入できる。
"""

import logging

from quotebox.config import REPOSITORY_SQLITE, Settings, load_settings
from quotebox.interfaces.quote_store import QuoteStoreInterface
from quotebox.service.quote_service import QuoteService

logger = logging.getLogger(__name__)

_quote_store: QuoteStoreInterface | None = None
_quote_service: QuoteService | None = None


def create_quote_store(settings: Settings) -> QuoteStoreInterface:
    """設定に応じた Store 実装を生成する。起動時に1回だけ呼ぶ。"""
    if settings.repository_type == REPOSITORY_SQLITE:
        from quotebox.store.sqlite import SqliteQuoteStore

        logger.info("Using SQLite quote store at %s", settings.database_path)
        return SqliteQuoteStore(settings.database_path)

    from quotebox.store.memory import InMemoryQuoteStore

    logger.info("Using in-memory quote store")
    return InMemoryQuoteStore()


def get_quote_store() -> QuoteStoreInterface:
    """QuoteStoreのシングルトンインスタンスを返す。"""
    global _quote_store
    if _quote_store is None:
        _quote_store = create_quote_store(load_settings())
    return _quote_store


def get_quote_service() -> QuoteService:
    """QuoteServiceのシングルトンインスタンスを返す。"""
    global _quote_service
    if _quote_service is None:
        _quote_service = QuoteService(get_quote_store())
    return _quote_service


def close_quote_store() -> None:
    """Storeを解放してシングルトンを破棄する（シャットダウン用）。

    解放に失敗した場合は例外をそのまま送出する。
    """
    global _quote_store, _quote_service
    store = _quote_store
    _quote_store = None
    _quote_service = None
    if store is not None:
        store.close()


def _reset_all() -> None:
    """全シングルトンをリセットする（テスト用）。"""
    global _quote_store, _quote_service
    _quote_store = None
    _quote_service = None
