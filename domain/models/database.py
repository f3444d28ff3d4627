"""
Declarative base shared by the domain models.

Models are used as plain in-memory entities; no engine or session is created here.
"""

from sqlalchemy.orm import declarative_base

# Create SQLAlchemy Base
Base = declarative_base()
