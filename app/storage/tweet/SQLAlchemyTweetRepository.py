from sqlalchemy import exists
from sqlalchemy.orm import Session

from app.models.tweet import Tweet
from app.schemas.tweet import TweetCreate, TweetOut
from app.storage.tweet.tweet_interface import ITweetRepository
from app.core.db import transaction


class SQLAlchemyTweetRepository(ITweetRepository):
    """
    使用 SQLAlchemy 实现的推文仓库
    """

    def __init__(self, db: Session):
        self.db = db

    def create_tweet(self, owner_id: str, data: TweetCreate) -> TweetOut:
        tweet = Tweet(owner_id=owner_id, content=data.content)

        with transaction(self.db):
            self.db.add(tweet)

        self.db.refresh(tweet)
        return TweetOut.model_validate(tweet)

    def exists(self, tid: str) -> bool:
        return bool(
            self.db.query(
                exists().where(Tweet.tid == tid, Tweet.deleted_at.is_(None))
            ).scalar()
        )
