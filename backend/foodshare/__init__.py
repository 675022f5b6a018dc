"""FoodShare: share perishable food items before they expire."""

__version__ = "1.0.0"
