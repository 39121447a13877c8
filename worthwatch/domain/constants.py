"""Domain constants for finance aggregation."""

from decimal import Decimal

PERSONAL_SHARING = "personal"

DEFAULT_CURRENCY = "USD"

# Investment quotes are denominated in this currency.
QUOTE_CURRENCY = "USD"

UNCATEGORIZED_NAME = "Uncategorized"
UNCATEGORIZED_ICON = "Paperclip"

SAVINGS_GOAL_TYPE = "Savings Goal"
INVESTMENT_TYPE = "Investment"

DEFAULT_ANNUAL_GROWTH_RATE = Decimal("7")
DEFAULT_PROJECTION_YEARS = 10
CONTRIBUTION_LOOKBACK_MONTHS = 12
HISTORY_LOOKBACK_YEARS = 5
MAX_MONTHS_TO_TARGET = 1200

# (name, icon, color) triples synthesized as default categories.
DEFAULT_EXPENSE_CATEGORIES = (
    ("Housing", "Home", "hsl(var(--chart-1))"),
    ("Groceries", "ShoppingCart", "hsl(var(--chart-2))"),
    ("Dining Out", "UtensilsCrossed", "hsl(var(--chart-3))"),
    ("Transportation", "CarFront", "hsl(var(--chart-4))"),
    ("Utilities", "Lightbulb", "hsl(var(--chart-5))"),
    ("Health & Wellness", "HeartPulse", "hsl(350 75% 65%)"),
    ("Shopping", "ShoppingBag", "hsl(250 75% 65%)"),
    ("Entertainment", "Ticket", "hsl(50 75% 65%)"),
    ("Subscriptions", "Repeat", "hsl(180 75% 65%)"),
    ("Other", "Paperclip", "hsl(0 0% 65%)"),
)

DEFAULT_INCOME_CATEGORIES = (
    ("Salary", "Briefcase", "hsl(var(--chart-2))"),
    ("Freelance", "Laptop", "hsl(180 75% 65%)"),
    ("Investment", "TrendingUp", "hsl(50 75% 65%)"),
    ("Gifts", "Gift", "hsl(var(--chart-5))"),
    ("Rental Income", "Building", "hsl(var(--chart-4))"),
    ("Other", "Paperclip", "hsl(0 0% 65%)"),
)

DEFAULT_ASSET_TYPES = (
    ("Savings", "Wallet", "hsl(var(--chart-1))"),
    ("Investment", "BarChart", "hsl(var(--chart-2))"),
    ("Real Estate", "Home", "hsl(var(--chart-3))"),
    ("Pension", "ShieldCheck", "hsl(var(--chart-4))"),
    ("Other", "Landmark", "hsl(var(--chart-5))"),
)


__all__ = [
    "PERSONAL_SHARING",
    "DEFAULT_CURRENCY",
    "QUOTE_CURRENCY",
    "UNCATEGORIZED_NAME",
    "UNCATEGORIZED_ICON",
    "SAVINGS_GOAL_TYPE",
    "INVESTMENT_TYPE",
    "DEFAULT_ANNUAL_GROWTH_RATE",
    "DEFAULT_PROJECTION_YEARS",
    "CONTRIBUTION_LOOKBACK_MONTHS",
    "HISTORY_LOOKBACK_YEARS",
    "MAX_MONTHS_TO_TARGET",
    "DEFAULT_EXPENSE_CATEGORIES",
    "DEFAULT_INCOME_CATEGORIES",
    "DEFAULT_ASSET_TYPES",
]
