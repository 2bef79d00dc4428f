"""Document model: one whole JSON collection per key."""
from datetime import datetime

from sqlalchemy import Column, String, Text, TIMESTAMP

from . import Base


class Document(Base):
    """A named JSON document, rewritten wholesale on every mutation."""

    __tablename__ = "documents"

    # Well-known document keys
    KEY_INGREDIENT_PRICES = "ingredient-prices"
    KEY_INGREDIENT_LOOKUP = "ingredients"
    KEY_RECIPES = "recipes"
    KEY_SALES = "sales"
    KEY_ORDERS = "orders"

    key = Column(String(50), primary_key=True)
    body = Column(Text, nullable=False)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Document(key='{self.key}', size={len(self.body or '')})>"
