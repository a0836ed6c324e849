"""Service layer package."""

from forum.services import (
    attachment_service,
    auth_service,
    comment_service,
    course_service,
    feed_service,
    post_service,
    user_service,
)
