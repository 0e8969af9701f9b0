"""引用サービス: 入力検証とStore呼び出しのオーケストレーター."""

import logging
import uuid

from quotebox.interfaces.errors import ValidationError
from quotebox.interfaces.quote_store import Quote, QuoteStoreInterface

logger = logging.getLogger(__name__)


class QuoteService:
    """引用サービス.

    入力検証とID採番だけを行い、保存・検索は Store に委譲する。
    状態は Store への参照のみ。排他制御は Store 側の責務。
    Store の例外は握りつぶさず、そのまま呼び出し側へ伝播する。
    """

    def __init__(self, store: QuoteStoreInterface) -> None:
        self._store = store

    def create_quote(self, text: str, author: str) -> Quote:
        """引用を作成する.

        IDは入力に依存しない UUID4 で採番する。

        Raises:
            ValidationError: text または author が空の場合
            AlreadyExistsError: 採番したIDが衝突した場合
        """
        if not text or not author:
            raise ValidationError("text and author cannot be empty")
        quote = Quote(id=str(uuid.uuid4()), text=text, author=author)
        self._store.create(quote)
        logger.info("Created quote %s", quote.id)
        return quote

    def get_all_quotes(self, author_filter: str = "") -> list[Quote]:
        """全引用を取得する. author_filter 指定時は Store 側で絞り込む."""
        if not author_filter:
            return self._store.get_all()
        return self._store.get_by_author(author_filter)

    def get_random_quote(self) -> Quote:
        return self._store.get_random()

    def delete_quote(self, quote_id: str) -> None:
        """引用を削除する.

        Raises:
            ValidationError: quote_id が空の場合
            NotFoundError: 存在しない場合
        """
        if not quote_id:
            raise ValidationError("id cannot be empty")
        self._store.delete(quote_id)
        logger.info("Deleted quote %s", quote_id)

    def get_by_id(self, quote_id: str) -> Quote:
        if not quote_id:
            raise ValidationError("id cannot be empty")
        return self._store.get_by_id(quote_id)
