"""
Common data structures shared across all layers.
"""

from typing import Dict

from pydantic import BaseModel, Field


class BoundingRect(BaseModel):
    """
    Axis-aligned rectangle in pixel coordinates.

    Produced by the border scanner and consumed by the cropper. Width and
    height may be zero; a zero-area rectangle is a degenerate result that
    callers must not crop with.
    """

    left: int = Field(..., ge=0, description="Left edge (inclusive)")
    top: int = Field(..., ge=0, description="Top edge (inclusive)")
    width: int = Field(..., ge=0, description="Width")
    height: int = Field(..., ge=0, description="Height")

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for service layer compatibility."""
        return {"left": self.left, "top": self.top, "width": self.width, "height": self.height}

    @classmethod
    def from_edges(cls, left: int, top: int, right: int, bottom: int) -> "BoundingRect":
        """Create BoundingRect from exclusive right/bottom edges."""
        return cls(left=left, top=top, width=right - left, height=bottom - top)

    @property
    def right(self) -> int:
        """Get right edge coordinate (exclusive)."""
        return self.left + self.width

    @property
    def bottom(self) -> int:
        """Get bottom edge coordinate (exclusive)."""
        return self.top + self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def fits_within(self, image_width: int, image_height: int) -> bool:
        """Check that the rectangle lies entirely inside an image of the given size."""
        return self.right <= image_width and self.bottom <= image_height


class Size(BaseModel):
    """Image dimensions"""

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
