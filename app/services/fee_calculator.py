# app/services/fee_calculator.py
"""
Parking fee calculation.

  - Up to and including BASE_WINDOW_MINUTES (120) → flat category rate
  - Beyond that, every started BLOCK_MINUTES (15) block adds rate // 4
    (integer quarter: motorcycle adds 3 per block, mini-bus adds 6)
  - Discount card → DISCOUNT_PERCENT (15%) off, rounded down to a whole unit

Pure functions, no state and no logging.
"""

from app.config import settings
from app.models.vehicle import VehicleCategory


def overage_blocks(elapsed_minutes: int, base_window: int = None, block_minutes: int = None) -> int:
    """Number of started blocks past the base window. 0 inside the window."""
    base_window = settings.BASE_WINDOW_MINUTES if base_window is None else base_window
    block_minutes = settings.BLOCK_MINUTES if block_minutes is None else block_minutes

    over = elapsed_minutes - base_window
    if over <= 0:
        return 0
    return -(-over // block_minutes)   # ceiling division


def apply_discount(amount: int, percent: int = None) -> int:
    percent = settings.DISCOUNT_PERCENT if percent is None else percent
    return amount * (100 - percent) // 100


def compute_fee(category: VehicleCategory, elapsed_minutes: int, has_discount: bool) -> int:
    """Amount owed for `elapsed_minutes` of parking in whole currency units."""
    rate = category.rate
    total = rate + overage_blocks(elapsed_minutes) * (rate // 4)
    return apply_discount(total) if has_discount else total
