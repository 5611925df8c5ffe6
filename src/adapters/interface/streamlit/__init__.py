"""Streamlit interface adapters package."""

__all__ = []
