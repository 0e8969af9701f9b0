"""Store層のインメモリ実装。

プロセス終了でデータは消える。テストや短命な起動向け。
"""

import random

from quotebox.interfaces.errors import (
    AlreadyExistsError,
    NoQuotesAvailableError,
    NotFoundError,
)
from quotebox.interfaces.quote_store import Quote, QuoteStoreInterface
from quotebox.store.rwlock import ReadWriteLock


class InMemoryQuoteStore(QuoteStoreInterface):
    """dict + 読み書きロックによるStore層実装。

    読み取り系は共有ロック下で必要な分だけコピーしてから返す。
    内部の dict への参照は外に出さない。
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """初期化。

        Args:
            rng: ランダム取得に使う乱数生成器（省略時は専用インスタンスを生成）
        """
        self._quotes: dict[str, Quote] = {}
        self._lock = ReadWriteLock()
        self._rng = rng if rng is not None else random.Random()

    def create(self, quote: Quote) -> None:
        with self._lock.write_locked():
            if quote.id in self._quotes:
                raise AlreadyExistsError(
                    f"quote with id {quote.id!r} already exists"
                )
            self._quotes[quote.id] = quote

    def get_all(self) -> list[Quote]:
        with self._lock.read_locked():
            return list(self._quotes.values())

    def get_by_id(self, quote_id: str) -> Quote:
        with self._lock.read_locked():
            quote = self._quotes.get(quote_id)
        if quote is None:
            raise NotFoundError(f"quote {quote_id!r} not found")
        return quote

    def get_by_author(self, author: str) -> list[Quote]:
        with self._lock.read_locked():
            return [q for q in self._quotes.values() if q.author == author]

    def delete(self, quote_id: str) -> None:
        with self._lock.write_locked():
            if quote_id not in self._quotes:
                raise NotFoundError(f"quote {quote_id!r} not found")
            del self._quotes[quote_id]

    def get_random(self) -> Quote:
        with self._lock.read_locked():
            snapshot = list(self._quotes.values())
        if not snapshot:
            raise NoQuotesAvailableError("no quotes available")
        # random.Random はスレッド間共有でも内部状態が壊れない
        return self._rng.choice(snapshot)
