"""ロギング設定。

ルートロガーにコンソールハンドラを1つだけ付ける。
2回目以降の呼び出しは何もしない。
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """ルートロガーを設定する。

    Args:
        level: レベル名（例: ``"DEBUG"``）。大文字小文字は区別しない。
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
