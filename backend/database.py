"""
Database module for SQLite storage of saved figures and their settings.
Uses SQLAlchemy for ORM functionality.
"""

from sqlalchemy import create_engine, Column, Integer, String, DateTime, Boolean
from sqlalchemy.orm import declarative_base, sessionmaker
from datetime import datetime

from config import DATABASE_URL

# Create SQLAlchemy engine
engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


class FigureRecord(Base):
    """
    SQLAlchemy model for saved figures.
    Stores the normalized configuration and the names of the exported files.
    """
    __tablename__ = "figures"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)

    # Normalized configuration
    body_color = Column(String(50), nullable=False, index=True)
    num_layers = Column(Integer, nullable=False)
    num_eyes = Column(Integer, nullable=False)
    eye_color = Column(String(50), nullable=False)
    has_arms = Column(Boolean, default=False)
    has_legs = Column(Boolean, default=False)
    mouth_style = Column(String(20), nullable=False)

    # Document viewport
    width = Column(Integer, nullable=False)
    height = Column(Integer, nullable=False)

    # File names (relative to the figures directory)
    svg_path = Column(String(500), nullable=True)
    png_path = Column(String(500), nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        """Convert model to dictionary for API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "body_color": self.body_color,
            "num_layers": self.num_layers,
            "num_eyes": self.num_eyes,
            "eye_color": self.eye_color,
            "has_arms": self.has_arms,
            "has_legs": self.has_legs,
            "mouth_style": self.mouth_style,
            "width": self.width,
            "height": self.height,
            "svg_path": self.svg_path,
            "png_path": self.png_path,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


def init_db():
    """Initialize the database by creating all tables."""
    Base.metadata.create_all(bind=engine)


def get_db():
    """
    Dependency function for FastAPI to get database session.
    Yields a session and ensures it's closed after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
