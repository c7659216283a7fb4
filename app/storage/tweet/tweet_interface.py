from typing import Protocol

from app.schemas.tweet import TweetCreate, TweetOut


class ITweetRepository(Protocol):
    """
    推文仓库接口协议
    """

    def create_tweet(self, owner_id: str, data: TweetCreate) -> TweetOut:
        ...

    def exists(self, tid: str) -> bool:
        """只判断推文是否存在（未软删）"""
        ...
