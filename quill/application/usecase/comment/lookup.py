"""Comment lookup shared by the comment mutation use cases."""

from quill.domain.error import NotFoundError
from quill.domain.model import Comment
from quill.domain.service import CommentService
from quill.domain.value import CommentId, PostId


async def require_comment(
    comment_service: CommentService, post_id: PostId, comment_id: CommentId
) -> Comment:
    """Load a comment addressed through its post.

    Raises:
        NotFoundError: If the comment does not exist or belongs to another post
    """
    comment = await comment_service.get_comment_by_id(comment_id)
    if comment is None or comment.post_id != post_id:
        raise NotFoundError("Comment", str(comment_id))
    return comment
