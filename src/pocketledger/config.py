"""
Central configuration constants for pocketledger.

Path resolution lives in pocketledger.workspace.Workspace. User-editable
settings live in config/settings.yml (see pocketledger.model.settings).
"""

DEFAULT_OWNER_ID = "local"
DEFAULT_LOCALE = "pt-BR"
DEFAULT_CURRENCY_SYMBOL = "R$"
DEFAULT_MAX_MONTHS = 6

# Fixed 12-entry month abbreviation tables used for dashboard labels.
MONTH_ABBREVIATIONS: dict[str, tuple[str, ...]] = {
    "pt-BR": ("Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez"),
    "en": ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
}

# Shown as the most frequent category when there are no transactions.
NO_CATEGORY = "none"

# Amount bounds: whole digits before the point and places after it. Sums of
# bounded amounts stay exact under the default 28-digit decimal context.
AMOUNT_WHOLE_DIGITS = 13
AMOUNT_DECIMAL_PLACES = 2

# (thousands, decimal) separators used when printing money.
NUMBER_SEPARATORS: dict[str, tuple[str, str]] = {
    "pt-BR": (".", ","),
    "en": (",", "."),
}
