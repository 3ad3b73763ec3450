"""SQLAlchemy ORM models for the park records store."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class ParkRecord(Base):
    """One licensed mobile home / RV park (table fl_parks)."""
    __tablename__ = "fl_parks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    permit: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    county: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Park
    park_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    park_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    park_city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    park_state: Mapped[str | None] = mapped_column(String(2), nullable=True)
    park_zip: Mapped[str | None] = mapped_column(String(10), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)

    # Owner
    owner_co: Mapped[str | None] = mapped_column(String(255), nullable=True)
    owner_first: Mapped[str | None] = mapped_column(String(100), nullable=True)
    owner_last: Mapped[str | None] = mapped_column(String(100), nullable=True)
    owner_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    owner_city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    owner_state: Mapped[str | None] = mapped_column(String(2), nullable=True)
    owner_zip: Mapped[str | None] = mapped_column(String(10), nullable=True)

    # Mailing
    mail_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mail_city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mail_state: Mapped[str | None] = mapped_column(String(2), nullable=True)
    mail_zip: Mapped[str | None] = mapped_column(String(10), nullable=True)

    # Capacity
    park_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    mh_spaces: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rv_spaces: Mapped[int | None] = mapped_column(Integer, nullable=True)
    billing_spaces: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Location
    latitude: Mapped[Decimal | None] = mapped_column(Numeric(10, 7), nullable=True)
    longitude: Mapped[Decimal | None] = mapped_column(Numeric(10, 7), nullable=True)
    geocode_status: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # 1 = low, 2 = moderate, 3+ = high
    flood_risk: Mapped[int | None] = mapped_column(Integer, nullable=True)


# Columns exposed as GeoJSON feature properties (coordinates go in the geometry)
PARK_PROPERTY_COLUMNS: tuple[str, ...] = (
    "id",
    "permit",
    "county",
    "park_name",
    "park_address",
    "park_city",
    "park_state",
    "park_zip",
    "phone",
    "owner_co",
    "owner_first",
    "owner_last",
    "owner_address",
    "owner_city",
    "owner_state",
    "owner_zip",
    "mail_address",
    "mail_city",
    "mail_state",
    "mail_zip",
    "park_type",
    "mh_spaces",
    "rv_spaces",
    "billing_spaces",
    "geocode_status",
    "flood_risk",
)
