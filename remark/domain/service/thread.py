"""Thread assembly.

Comments are stored flat. The public view is built from two flat lists,
top-level comments and the replies of exactly those comments, joined in
memory:

    threads = assemble_threads(top_level, replies)

Both inputs arrive already filtered and sorted; assembly never reorders.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Sequence

from remark.domain.model import Comment
from remark.domain.value import CommentId


@dataclass
class CommentThread:
    """A top-level comment with its replies.

    Replies keep the order they were given in (oldest first).
    """

    comment: Comment
    replies: list[Comment] = field(default_factory=list)


def assemble_threads(
    top_level: Sequence[Comment], replies: Sequence[Comment]
) -> list[CommentThread]:
    """Attach replies to their top-level comments.

    Runs in O(t + r): one pass groups replies by parent, one lookup per
    top-level comment attaches them. Replies whose parent is not in
    top_level are dropped, so a reply never outlives its thread in the
    rendered view.

    Args:
        top_level: Top-level comments, newest first
        replies: Replies of those comments, oldest first

    Returns:
        One thread per top-level comment, in input order
    """
    by_parent: dict[CommentId, list[Comment]] = defaultdict(list)
    for reply in replies:
        if reply.parent_comment_id is not None:
            by_parent[reply.parent_comment_id].append(reply)

    return [
        CommentThread(comment=comment, replies=list(by_parent.get(comment.id, [])))
        for comment in top_level
    ]
