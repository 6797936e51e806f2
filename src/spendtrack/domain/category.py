"""Category domain service."""

from typing import Optional
from spendtrack.database.base import Database
from spendtrack.domain.entities import Category
from spendtrack.domain.errors import NotFoundError, ValidationError, category_not_found


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(self, name: str) -> int:
        """Create a category.

        Args:
            name: Category name

        Returns:
            Category ID

        Raises:
            ValidationError: If name is empty
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name cannot be empty")
        return self.db.create_category(name=name)

    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID.

        Args:
            category_id: Category ID

        Returns:
            Category entity or None if not found
        """
        return self.db.get_category(category_id)

    def require_category(self, category_id: int) -> Category:
        """Get category by ID or raise NotFoundError."""
        category = self.db.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def delete_category(self, category_id: int) -> None:
        """Delete a category.

        Expenses that reference the category keep their category_id.

        Raises:
            NotFoundError: If category doesn't exist
        """
        if not self.db.delete_category(category_id):
            raise NotFoundError(category_not_found(category_id))

    def list_categories(self) -> list[Category]:
        """List categories in the order they were created."""
        return self.db.list_categories()

    def format_category(self, category_id: Optional[int]) -> str:
        """Get display name for a category reference.

        Returns an empty string for no category and a placeholder for ids
        whose category has since been deleted.
        """
        if category_id is None:
            return ""
        category = self.get_category(category_id)
        if category is None:
            return f"Unknown (ID: {category_id})"
        return category.name
