"""層間インターフェース定義。

全ての層はこのパッケージの抽象クラスと例外にのみ依存する。
quotebox/store/ の実装に直接依存してはならない。
"""
