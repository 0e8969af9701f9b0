"""Store層の抽象インターフェース。

引用の永続化と検索を担う。
インメモリ実装と SQLite 実装はどちらもこの契約に従う。
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Quote:
    """引用（ドメインモデル）。作成後は変更不可。"""

    id: str
    text: str
    author: str


class QuoteStoreInterface(ABC):
    """Store層の抽象インターフェース。

    実装は複数スレッドから同時に呼ばれても安全でなければならない。
    呼び出し側が排他制御をする必要はない。
    """

    @abstractmethod
    def create(self, quote: Quote) -> None:
        """引用を保存する。

        Raises:
            AlreadyExistsError: 同じIDが既に存在する場合
        """
        ...

    @abstractmethod
    def get_all(self) -> list[Quote]:
        """全引用を取得する。順序は不定。空なら空リスト。"""
        ...

    @abstractmethod
    def get_by_id(self, quote_id: str) -> Quote:
        """IDで引用を取得する。

        Raises:
            NotFoundError: 存在しない場合
        """
        ...

    @abstractmethod
    def get_by_author(self, author: str) -> list[Quote]:
        """著者名の完全一致（大文字小文字を区別）で取得する。該当なしは空リスト。"""
        ...

    @abstractmethod
    def delete(self, quote_id: str) -> None:
        """IDで引用を削除する。

        Raises:
            NotFoundError: 存在しない場合
        """
        ...

    @abstractmethod
    def get_random(self) -> Quote:
        """現在の引用から一様ランダムに1件取得する。

        Raises:
            NoQuotesAvailableError: ストアが空の場合
        """
        ...

    def close(self) -> None:
        """保持しているリソースを解放する（シャットダウン時に1回だけ呼ぶ）。

        解放対象がない実装では何もしない。
        """
