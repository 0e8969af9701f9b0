"""Store層のSQLite実装。

QuoteStoreInterfaceに準拠したSQLite実装を提供する。
プロセス再起動後もデータが残る。
"""

import logging
import sqlite3
import threading

from quotebox.interfaces.errors import (
    AlreadyExistsError,
    BackendFailureError,
    NoQuotesAvailableError,
    NotFoundError,
)
from quotebox.interfaces.quote_store import Quote, QuoteStoreInterface

logger = logging.getLogger(__name__)

# スキーマ定義（マイグレーションはしない）
SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS quotes (
    id      TEXT PRIMARY KEY,
    text    TEXT NOT NULL,
    author  TEXT NOT NULL
);
"""


class SqliteQuoteStore(QuoteStoreInterface):
    """SQLiteによるStore層実装。

    接続は1本をスレッド間で共有する。
    各操作は ``_lock`` の下で文の実行から commit/rollback までを行い、
    あるスレッドの rollback が他スレッドの書き込みを巻き戻さないようにする。
    """

    def __init__(self, db_path: str):
        """初期化。

        Args:
            db_path: SQLiteデータベースファイルのパス

        Raises:
            BackendFailureError: 接続またはスキーマ作成に失敗した場合
        """
        self._db_path = db_path
        self._lock = threading.Lock()
        try:
            self._conn = sqlite3.connect(db_path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise BackendFailureError(
                f"failed to open database {db_path!r}: {exc}"
            ) from exc
        try:
            with self._conn:
                self._conn.executescript(SCHEMA_SQL)
        except sqlite3.Error as exc:
            self._conn.close()
            raise BackendFailureError(
                f"failed to initialize database {db_path!r}: {exc}"
            ) from exc

    def close(self) -> None:
        """接続を閉じる。失敗は BackendFailureError として呼び出し側へ返す。"""
        with self._lock:
            try:
                self._conn.close()
            except sqlite3.Error as exc:
                raise BackendFailureError(
                    f"failed to close database {self._db_path!r}: {exc}"
                ) from exc
        logger.info("Closed SQLite quote store at %s", self._db_path)

    def create(self, quote: Quote) -> None:
        try:
            with self._lock, self._conn:
                self._conn.execute(
                    "INSERT INTO quotes (id, text, author) VALUES (?, ?, ?)",
                    (quote.id, quote.text, quote.author),
                )
        except sqlite3.IntegrityError as exc:
            if exc.sqlite_errorcode == sqlite3.SQLITE_CONSTRAINT_PRIMARYKEY:
                raise AlreadyExistsError(
                    f"quote with id {quote.id!r} already exists"
                ) from exc
            raise BackendFailureError(f"failed to create quote: {exc}") from exc
        except sqlite3.Error as exc:
            raise BackendFailureError(f"failed to create quote: {exc}") from exc

    def get_all(self) -> list[Quote]:
        rows = self._fetchall(
            "failed to get all quotes",
            "SELECT id, text, author FROM quotes",
        )
        return [Quote(id=r[0], text=r[1], author=r[2]) for r in rows]

    def get_by_id(self, quote_id: str) -> Quote:
        row = self._fetchone(
            "failed to get quote by id",
            "SELECT id, text, author FROM quotes WHERE id = ?",
            (quote_id,),
        )
        if row is None:
            raise NotFoundError(f"quote {quote_id!r} not found")
        return Quote(id=row[0], text=row[1], author=row[2])

    def get_by_author(self, author: str) -> list[Quote]:
        rows = self._fetchall(
            "failed to get quotes by author",
            "SELECT id, text, author FROM quotes WHERE author = ?",
            (author,),
        )
        return [Quote(id=r[0], text=r[1], author=r[2]) for r in rows]

    def delete(self, quote_id: str) -> None:
        try:
            with self._lock, self._conn:
                cursor = self._conn.execute(
                    "DELETE FROM quotes WHERE id = ?", (quote_id,)
                )
                deleted = cursor.rowcount
        except sqlite3.Error as exc:
            raise BackendFailureError(f"failed to delete quote: {exc}") from exc
        if deleted == 0:
            raise NotFoundError(f"quote {quote_id!r} not found")

    def get_random(self) -> Quote:
        row = self._fetchone(
            "failed to get random quote",
            "SELECT id, text, author FROM quotes ORDER BY RANDOM() LIMIT 1",
        )
        if row is None:
            raise NoQuotesAvailableError("no quotes available")
        return Quote(id=row[0], text=row[1], author=row[2])

    def _fetchall(self, context: str, query: str, params: tuple = ()) -> list:
        """SELECT を実行して全行を返す。ドライバ例外は context 付きで包む。"""
        try:
            with self._lock:
                return self._conn.execute(query, params).fetchall()
        except sqlite3.Error as exc:
            raise BackendFailureError(f"{context}: {exc}") from exc

    def _fetchone(self, context: str, query: str, params: tuple = ()):
        """SELECT を実行して先頭1行（なければ None）を返す。"""
        try:
            with self._lock:
                return self._conn.execute(query, params).fetchone()
        except sqlite3.Error as exc:
            raise BackendFailureError(f"{context}: {exc}") from exc
