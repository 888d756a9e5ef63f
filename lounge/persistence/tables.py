"""SQLAlchemy table definitions for Fandom Lounge.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# LOUNGES TABLE
# ============================================================================
lounges_table = Table(
    "lounges",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(50), nullable=False),
    Column("slug", String(50), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column("icon", Text, nullable=True),
    Column("member_count", Integer, nullable=False, server_default="0"),
    Column("is_official", Boolean, nullable=False, server_default="false"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_lounges_member_count", lounges_table.c.member_count.desc())

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "lounge_id", UUID, ForeignKey("lounges.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_id", UUID, nullable=False),
    Column("author_nickname", String(50), nullable=False),  # Denormalized from users
    Column(
        "type",
        Enum(
            "TEXT", "IMAGE", "VIDEO", "CLIP", "FANART", name="post_type", create_type=False
        ),
        nullable=False,
        server_default="TEXT",
    ),
    Column("title", String(200), nullable=True),
    Column("content", Text, nullable=False),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("upvote_count >= 0", name="posts_upvote_count_non_negative"),
    CheckConstraint("downvote_count >= 0", name="posts_downvote_count_non_negative"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_lounge_id", posts_table.c.lounge_id)
Index("idx_posts_deleted_at", posts_table.c.deleted_at)

# ============================================================================
# POST_TAGS TABLE
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("tag", String(50), nullable=False),
    UniqueConstraint("post_id", "tag", name="uq_post_tag"),
)

Index("idx_post_tags_tag", post_tags_table.c.tag)

# ============================================================================
# POPULAR_TAGS TABLE (precomputed popularity cache)
# ============================================================================
popular_tags_table = Table(
    "popular_tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("tag", String(50), nullable=False),
    Column("count", Integer, nullable=False, server_default="0"),
    Column(
        "lounge_id", UUID, ForeignKey("lounges.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_popular_tags_lounge_count",
    popular_tags_table.c.lounge_id,
    popular_tags_table.c.count.desc(),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("upvote_count >= 0", name="comments_upvote_count_non_negative"),
    CheckConstraint(
        "downvote_count >= 0", name="comments_downvote_count_non_negative"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),
    Column(
        "votable_type",
        Enum("POST", "COMMENT", name="votable_type", create_type=False),
        nullable=False,
    ),
    Column("votable_id", UUID, nullable=False),
    Column(
        "vote_type",
        Enum("UPVOTE", "DOWNVOTE", name="vote_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "votable_type", "votable_id", name="unique_vote"),
)

Index("idx_votes_user_id", votes_table.c.user_id)
