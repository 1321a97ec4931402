from sqlalchemy.orm import declarative_base
import enum

Base = declarative_base()


# ============================================================================
# ENUMS
# ============================================================================

class Endpoint(str, enum.Enum):
    """Collections exposed by the remote API"""
    USERS = "/users"
    POSTS = "/posts"
    COMMENTS = "/comments"
    ALBUMS = "/albums"
    PHOTOS = "/photos"
    TODOS = "/todos"

    @classmethod
    def values(cls):
        return [member.value for member in cls]


# Query parameters the remote API accepts as relational filters
FILTER_KEYS = ("userId", "postId", "albumId")
