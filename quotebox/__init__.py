"""引用の保存・配信サービス。

Store層（インメモリ / SQLite）、サービス層、HTTP層から成る。
"""
