"""Typed models for Feedly Cloud resources."""
from feedly_cloud.models.boards import Board, UpdateBoardRequest
from feedly_cloud.models.collections import (
    AddFeedRequest,
    Collection,
    CreateOrUpdateCollectionRequest,
    DeleteFeedRequest,
)
from feedly_cloud.models.entries import (
    Category,
    Content,
    Entry,
    Link,
    Origin,
    Tag,
    Visual,
)
from feedly_cloud.models.feeds import Feed
from feedly_cloud.models.priorities import Filter, Priority
from feedly_cloud.models.profile import Profile, UpdateProfileRequest

__all__ = [
    "AddFeedRequest",
    "Board",
    "Category",
    "Collection",
    "Content",
    "CreateOrUpdateCollectionRequest",
    "DeleteFeedRequest",
    "Entry",
    "Feed",
    "Filter",
    "Link",
    "Origin",
    "Priority",
    "Profile",
    "Tag",
    "UpdateBoardRequest",
    "UpdateProfileRequest",
    "Visual",
]
