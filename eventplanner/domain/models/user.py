"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, Integer, String

from eventplanner.infrastructure.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default="Staff")  # Admin, Staff, ...

    def __repr__(self):
        return f"<User {self.email}>"
