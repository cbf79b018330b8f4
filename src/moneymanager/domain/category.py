"""Category domain service."""

import logging
import re
from typing import Optional

from moneymanager.database.base import Database
from moneymanager.domain.entities import Category as CategoryEntity, TransactionType
from moneymanager.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    category_delete_blocked,
    category_not_found,
)

logger = logging.getLogger(__name__)

DEFAULT_ICON = "Receipt"


def slugify(name: str) -> str:
    """Build a category ID from its name (e.g. "Other Expense" -> "other-expense")."""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(
        self,
        name: str,
        category_type: TransactionType,
        icon: str = DEFAULT_ICON,
        category_id: Optional[str] = None,
    ) -> str:
        """Create a category.

        Args:
            name: Display name
            category_type: Income or expense
            icon: Icon name shown by clients
            category_id: Optional explicit ID; derived from the name if None

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is blank
            ConflictError: If the ID is already taken
        """
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        category_id = category_id or slugify(name)
        if not category_id:
            raise ValidationError(f"Cannot derive a category ID from '{name}'")
        if self.db.category_exists(category_id):
            raise ConflictError(f"Category with ID '{category_id}' already exists")

        created_id = self.db.create_category(
            name=name,
            icon=icon,
            category_type=TransactionType(category_type),
            category_id=category_id,
        )
        logger.info("Created category: %s - %s", created_id, name)
        return created_id

    def get_category(self, category_id: str) -> Optional[CategoryEntity]:
        """Get category by ID.

        Returns:
            Category entity or None if not found
        """
        return self.db.get_category(category_id)

    def require_category(self, category: str) -> CategoryEntity:
        """Resolve a category by ID or by exact name.

        Raises:
            NotFoundError: If nothing matches
        """
        found = self.db.get_category(category)
        if found is not None:
            return found
        for cat in self.db.list_categories():
            if cat.name == category:
                return cat
        raise NotFoundError(category_not_found(category))

    def list_categories(
        self, category_type: Optional[TransactionType] = None
    ) -> list[CategoryEntity]:
        """List categories, optionally only those of one type."""
        return self.db.list_categories(category_type=category_type)

    def update_category(
        self,
        category_id: str,
        name: Optional[str] = None,
        icon: Optional[str] = None,
        category_type: Optional[TransactionType] = None,
    ) -> CategoryEntity:
        """Update category fields that are provided."""
        if self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))
        if name is not None and not name.strip():
            raise ValidationError("Category name is required")

        self.db.update_category(
            category_id,
            name=name,
            icon=icon,
            category_type=TransactionType(category_type) if category_type else None,
        )
        logger.info("Updated category: %s", category_id)
        return self.db.get_category(category_id)

    def delete_category(self, category_id: str) -> None:
        """Delete a category that no transaction references.

        Raises:
            NotFoundError: If category not found
            DependencyError: If transactions still use it
        """
        if self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        transaction_count = self.db.get_category_transaction_count(category_id)
        if transaction_count > 0:
            logger.warning("Refused to delete referenced category %s", category_id)
            raise DependencyError(category_delete_blocked(category_id, transaction_count))

        self.db.delete_category(category_id)
        logger.info("Deleted category: %s", category_id)
