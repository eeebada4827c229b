# hotel_search/db/models/__init__.py
from .user import User
from .user_meta import UserMeta
from .post import Post, POST_TYPE_REVIEW, POST_TYPE_ROOM
from .post_meta import PostMeta
