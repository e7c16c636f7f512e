"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    func,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# YOINKS TABLE (append-only)
# ============================================================================
yoinks_table = Table(
    "yoinks",
    metadata,
    # INTEGER on SQLite so the column aliases the rowid; AUTOINCREMENT forbids id reuse
    Column(
        "id",
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    ),
    Column("topic", Text, nullable=False),
    Column("timestamp", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("content", Text, nullable=False),  # JSON document as text
    sqlite_autoincrement=True,
)

Index(
    "idx_yoinks_topic_timestamp",
    yoinks_table.c.topic,
    yoinks_table.c.timestamp.desc(),
    yoinks_table.c.id.desc(),
)
