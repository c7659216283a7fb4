from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.logx import logger
from app.core.biz_response import BizResponse
from app.storage.database import init_db
from app.routers import users, videos, likes, comments, tweets


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        init_db()
        logger.info("Database tables ensured")
    yield


app = FastAPI(title="VideoTube Engagement Service", lifespan=lifespan)


# 依赖 / 路由层抛出的 HTTPException（如缺少 X-User-Id）也走统一响应体
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return BizResponse(data=None, msg=str(exc.detail), status_code=exc.status_code, headers=exc.headers)


# 注册路由
app.include_router(users.users_router)
app.include_router(videos.videos_router)
app.include_router(likes.likes_router)
app.include_router(comments.comments_router)
app.include_router(tweets.tweets_router)

# uvicorn main:app
# uvicorn main:app --reload
@app.get("/")
def root():
    return {"message": "Welcome to VideoTube Engagement Service"}
