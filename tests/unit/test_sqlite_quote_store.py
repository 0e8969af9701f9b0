"""SQLite実装固有のテスト（永続化・解放・障害時のラップ）。"""

import sqlite3

import pytest

from quotebox.interfaces.errors import (
    AlreadyExistsError,
    BackendFailureError,
)
from quotebox.interfaces.quote_store import Quote
from quotebox.store.sqlite import SqliteQuoteStore


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "quotes.db")


class TestPersistence:
    """再起動を跨いだ永続化。"""

    def test_survives_reopen(self, db_path):
        """閉じて開き直してもデータが残る。"""
        store = SqliteQuoteStore(db_path)
        store.create(Quote(id="p1", text="T", author="Al"))
        store.close()

        reopened = SqliteQuoteStore(db_path)
        try:
            assert reopened.get_by_id("p1") == Quote(id="p1", text="T", author="Al")
        finally:
            reopened.close()

    def test_schema_creation_is_idempotent(self, db_path):
        """既存テーブルがあっても初期化が失敗しない。"""
        SqliteQuoteStore(db_path).close()
        SqliteQuoteStore(db_path).close()

        conn = sqlite3.connect(db_path)
        try:
            cols = [row[1] for row in conn.execute("PRAGMA table_info(quotes)")]
        finally:
            conn.close()
        assert cols == ["id", "text", "author"]

    def test_duplicate_detected_across_reopen(self, db_path):
        store = SqliteQuoteStore(db_path)
        store.create(Quote(id="p1", text="T", author="Al"))
        store.close()

        reopened = SqliteQuoteStore(db_path)
        try:
            with pytest.raises(AlreadyExistsError):
                reopened.create(Quote(id="p1", text="other", author="Bo"))
        finally:
            reopened.close()


class TestFailures:
    """ドライバ例外が BackendFailureError に包まれる。"""

    def test_operation_after_close_raises_backend_failure(self, db_path):
        store = SqliteQuoteStore(db_path)
        store.close()

        with pytest.raises(BackendFailureError) as exc_info:
            store.get_all()
        assert isinstance(exc_info.value.__cause__, sqlite3.Error)

    def test_create_after_close_raises_backend_failure(self, db_path):
        store = SqliteQuoteStore(db_path)
        store.close()

        with pytest.raises(BackendFailureError, match="failed to create quote"):
            store.create(Quote(id="x", text="T", author="Al"))

    def test_not_null_violation_is_not_already_exists(self, db_path):
        """主キー以外の制約違反は AlreadyExistsError にしない。"""
        store = SqliteQuoteStore(db_path)
        try:
            with pytest.raises(BackendFailureError):
                store.create(Quote(id="x", text=None, author="Al"))  # type: ignore[arg-type]
        finally:
            store.close()

    def test_unopenable_path_raises_backend_failure(self, tmp_path):
        missing_dir = tmp_path / "no" / "such" / "dir" / "q.db"

        with pytest.raises(BackendFailureError):
            SqliteQuoteStore(str(missing_dir))
