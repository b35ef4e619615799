from sqlalchemy import Column, Integer, String, TIMESTAMP, CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base
from .enums import Membership, Role, values_of


class User(Base):
    __tablename__ = "users"
    
    # Primary Key
    id_user = Column(Integer, primary_key=True, index=True)
    
    # Authentication & Identity
    username = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    
    # Role & Membership
    role = Column(String(20), nullable=False, default=Role.PEMBACA.value, index=True)
    membership = Column(String(20), nullable=False, default=Membership.FREE.value)
    
    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
    
    # Constraints
    __table_args__ = (
        CheckConstraint(f"role IN ({values_of(Role)})", name="check_user_role"),
        CheckConstraint(f"membership IN ({values_of(Membership)})", name="check_user_membership"),
    )
    
    # Relationships
    # Berita tidak ikut terhapus: penulis yang hilang diproyeksikan sebagai null
    likes = relationship("Disukai", back_populates="user", cascade="all, delete-orphan")
    dislikes = relationship("TidakDisukai", back_populates="user", cascade="all, delete-orphan")
    history = relationship("History", back_populates="user", cascade="all, delete-orphan")
    bookmarks = relationship("Bookmark", back_populates="user", cascade="all, delete-orphan")
    notifications = relationship("Notification", back_populates="user", cascade="all, delete-orphan")
    reports = relationship("Report", back_populates="user", cascade="all, delete-orphan")

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    @property
    def is_premium(self) -> bool:
        return self.membership == Membership.PREMIUM.value
