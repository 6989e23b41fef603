import datetime
import sqlalchemy
import sqlalchemy.orm
from catalog.models.base import Base


class Comment(Base):
    __tablename__ = "comments"
    __table_args__ = (
        sqlalchemy.Index("ix_comments_book_id_created_at_comment_id", "book_id", "created_at", "comment_id"),
        sqlalchemy.Index("ix_comments_user_id_created_at", "user_id", "created_at"),
    )

    comment_id: sqlalchemy.orm.Mapped[int] = sqlalchemy.orm.mapped_column(
        sqlalchemy.BigInteger().with_variant(sqlalchemy.Integer, "sqlite"), primary_key=True
    )
    user_id: sqlalchemy.orm.Mapped[int] = sqlalchemy.orm.mapped_column(
        sqlalchemy.BigInteger, sqlalchemy.ForeignKey("users.user_id"), nullable=False
    )
    book_id: sqlalchemy.orm.Mapped[int] = sqlalchemy.orm.mapped_column(
        sqlalchemy.BigInteger, sqlalchemy.ForeignKey("books.book_id"), nullable=False
    )
    body: sqlalchemy.orm.Mapped[str] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Text, nullable=False
    )
    created_at: sqlalchemy.orm.Mapped[datetime.datetime] = sqlalchemy.orm.mapped_column(
        sqlalchemy.DateTime, nullable=False, server_default=sqlalchemy.func.now()
    )
