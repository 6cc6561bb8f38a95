"""Event domain model — maps to the 'events' table."""

from sqlalchemy import BigInteger, Column, String, Text

from eventplanner.infrastructure.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(String(100), primary_key=True)

    # Booking details
    event_name = Column(String(300), nullable=True)
    customer_name = Column(String(300), nullable=True)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    data_type = Column(String(100), nullable=True)
    created_by = Column(String(200), nullable=True)
    status = Column(String(100), nullable=True)
    venue = Column(String(300), nullable=True)
    date_time = Column(String(100), nullable=True)  # free text, as entered

    # Money (whole currency units); balance = total_cost - paid
    paid = Column(BigInteger, nullable=False, default=0)
    balance = Column(BigInteger, nullable=False, default=0)
    total_cost = Column(BigInteger, nullable=False, default=0)

    created_at = Column(String(64), nullable=True)  # ISO 8601

    def __repr__(self):
        return f"<Event {self.id} - {self.event_name}>"
