"""FastAPIアプリケーション。

引用の作成・一覧・取得・ランダム取得・削除APIを提供する。
エンドポイントは同期関数で定義し、FastAPI のスレッドプールで並行実行させる。
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from pydantic import BaseModel

from quotebox.config import load_settings
from quotebox.dependencies import close_quote_store, get_quote_service
from quotebox.interfaces.errors import (
    NoQuotesAvailableError,
    NotFoundError,
    QuoteError,
    ValidationError,
)
from quotebox.interfaces.quote_store import Quote
from quotebox.logging_config import setup_logging
from quotebox.service.quote_service import QuoteService

logger = logging.getLogger(__name__)

MAX_BODY_BYTES = 1 << 20
"""POST /quotes が受け付けるリクエストボディの上限（1 MiB）。"""

ServiceDep = Annotated[QuoteService, Depends(get_quote_service)]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """起動時に Store を生成し、終了時に解放する。"""
    settings = load_settings()
    setup_logging(settings.log_level)
    get_quote_service()
    yield
    logger.info("Shutting down, releasing quote store")
    try:
        close_quote_store()
    except QuoteError:
        logger.exception("Failed to release quote store")
        raise


app = FastAPI(
    title="Quote API",
    version="0.1.0",
    lifespan=lifespan,
)


# ---------- Pydantic モデル ----------


class QuoteCreateRequest(BaseModel):
    """POST /quotes のリクエストボディ。空文字の検証はサービス層で行う。"""

    text: str
    author: str


class QuoteResponse(BaseModel):
    """1件の引用レスポンス。"""

    id: str
    text: str
    author: str


# ---------- ヘルパー ----------


async def limit_body_size(request: Request) -> None:
    """リクエストボディが MAX_BODY_BYTES を超えたら 413 を返す。"""
    # ボディは FastAPI が読み込み済みで、ここではキャッシュを参照するだけ
    if len(await request.body()) > MAX_BODY_BYTES:
        raise HTTPException(status_code=413, detail="Request body too large")


def _to_response(quote: Quote) -> QuoteResponse:
    return QuoteResponse(id=quote.id, text=quote.text, author=quote.author)


# ---------- エンドポイント ----------


@app.get("/health")
def health_check():
    """ヘルスチェック。"""
    return {"status": "ok"}


@app.post(
    "/quotes",
    status_code=201,
    response_model=QuoteResponse,
    dependencies=[Depends(limit_body_size)],
)
def create_quote(body: QuoteCreateRequest, service: ServiceDep):
    """引用を作成する。"""
    try:
        quote = service.create_quote(body.text, body.author)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except QuoteError as exc:
        logger.exception("Error creating quote")
        raise HTTPException(
            status_code=500, detail="Failed to create quote"
        ) from exc
    return _to_response(quote)


@app.get("/quotes", response_model=list[QuoteResponse])
def list_quotes(service: ServiceDep, author: str = ""):
    """引用一覧を取得する。author 指定時は著者で絞り込む。"""
    try:
        quotes = service.get_all_quotes(author)
    except QuoteError as exc:
        logger.exception("Error getting quotes")
        raise HTTPException(
            status_code=500, detail="Failed to retrieve quotes"
        ) from exc
    return [_to_response(q) for q in quotes]


# /quotes/{quote_id} より先に登録する
@app.get("/quotes/random", response_model=QuoteResponse)
def get_random_quote(service: ServiceDep):
    """ランダムに1件取得する。空なら404。"""
    try:
        quote = service.get_random_quote()
    except NoQuotesAvailableError as exc:
        raise HTTPException(status_code=404, detail="No quotes found") from exc
    except QuoteError as exc:
        logger.exception("Error getting random quote")
        raise HTTPException(
            status_code=500, detail="Failed to retrieve random quote"
        ) from exc
    return _to_response(quote)


@app.get("/quotes/{quote_id}", response_model=QuoteResponse)
def get_quote(quote_id: str, service: ServiceDep):
    """IDで1件取得する。未登録なら404。"""
    try:
        quote = service.get_by_id(quote_id)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail="Quote not found") from exc
    except QuoteError as exc:
        logger.exception("Error getting quote %s", quote_id)
        raise HTTPException(
            status_code=500, detail="Failed to retrieve quote"
        ) from exc
    return _to_response(quote)


@app.delete("/quotes/{quote_id}", status_code=204)
def delete_quote(quote_id: str, service: ServiceDep):
    """IDで削除する。未登録なら404。"""
    try:
        service.delete_quote(quote_id)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail="Quote not found") from exc
    except QuoteError as exc:
        logger.exception("Error deleting quote %s", quote_id)
        raise HTTPException(
            status_code=500, detail="Failed to delete quote"
        ) from exc
    return Response(status_code=204)
