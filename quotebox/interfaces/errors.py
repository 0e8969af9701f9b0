"""引用ストア・サービス共通の例外定義。

HTTP層は例外の型だけを見てステータスコードを決める。
メッセージ文字列での判定はしない。
"""


class QuoteError(Exception):
    """quotebox の全例外の基底クラス。"""


class ValidationError(QuoteError):
    """呼び出し側の入力が不正。Storeには到達しない。"""


class AlreadyExistsError(QuoteError):
    """同じIDの引用が既に存在する。"""


class NotFoundError(QuoteError):
    """指定IDの引用が存在しない。"""


class NoQuotesAvailableError(QuoteError):
    """ストアが空でランダム取得できない。"""


class BackendFailureError(QuoteError):
    """ストレージエンジン側の障害。

    元の例外は ``__cause__`` に保持される。
    """
