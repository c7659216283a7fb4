from fastapi import APIRouter, Depends

from app.schemas.tweet import TweetCreate, TweetOut
from app.core.biz_response import BizResponse
from app.core.logx import logger
from app.core.security import get_current_user_id
from app.service import tweet_svc

from app.storage.database import get_tweet_repo
from app.storage.tweet.tweet_interface import ITweetRepository

tweets_router = APIRouter(prefix="/tweets", tags=["tweets"])


@tweets_router.post("/", response_model=TweetOut)
def create_tweet(
    payload: TweetCreate,
    user_id: str = Depends(get_current_user_id),
    tweet_repo: ITweetRepository = Depends(get_tweet_repo),
):
    """发布推文"""
    try:
        tweet = tweet_svc.create_tweet(tweet_repo=tweet_repo, owner_id=user_id, data=payload, to_dict=True)
        return BizResponse(data=tweet, msg="Tweet created successfully", status_code=201)
    except Exception as e:
        logger.exception("create_tweet error")
        return BizResponse(data=None, msg=str(e), status_code=500)
