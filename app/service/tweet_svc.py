from typing import Dict

from app.schemas.tweet import TweetCreate, TweetOut
from app.storage.tweet.tweet_interface import ITweetRepository
from app.core.logx import logger


def create_tweet(tweet_repo: ITweetRepository, owner_id: str, data: TweetCreate, to_dict: bool = True) -> Dict | TweetOut:
    tweet = tweet_repo.create_tweet(owner_id, data)
    logger.info(f"User {owner_id} posted tweet tid={tweet.tid}")
    return tweet.model_dump() if to_dict else tweet
