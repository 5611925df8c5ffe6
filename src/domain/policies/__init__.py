"""Domain policies package."""

from .account_filters import is_reportable_account, is_summary_row_name

__all__ = ["is_reportable_account", "is_summary_row_name"]
