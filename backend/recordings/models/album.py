"""
Recordings API: Album SQLAlchemy Model
=======================================

What:  ORM model representing the `album` table.
How:   Inherits from the declarative Base; tests create the table from
       Base.metadata, production uses an externally managed schema.
Who:   Used by SQLAlbumStore to build its INSERT and SELECT statements.

Table layout (matches the existing `recordings` database):
    id      INT AUTO_INCREMENT PRIMARY KEY
    title   VARCHAR(128) NOT NULL
    artist  VARCHAR(255) NOT NULL
    price   DECIMAL(5,2) NOT NULL
"""

from sqlalchemy import BigInteger, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from recordings.database import Base


class Album(Base):
    """
    A single album row.

    Lifecycle:
        1. Inserted by SQLAlbumStore.create(); the database assigns `id`
        2. Read by primary key or by artist name
        3. Never updated or deleted through this service
    """

    __tablename__ = "album"

    # SQLite only autoincrements an INTEGER PRIMARY KEY, hence the variant
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(String(128), nullable=False)
    artist: Mapped[str] = mapped_column(String(255), nullable=False)

    # DECIMAL in the database, float in Python and JSON
    price: Mapped[float] = mapped_column(
        Numeric(5, 2, asdecimal=False),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Album(id={self.id}, title='{self.title}', artist='{self.artist}')>"
