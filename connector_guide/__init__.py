"""
Connector Guide

Streamlit application for selecting connectors and terminals from the
product catalog.

Structure:
- wizard/: Connector selection wizard (state, query composer, result fetcher)
- catalog/: Catalog read interface (Supabase and in-memory implementations)
- i18n/: JSON-backed translations
- ui/: Page rendering (wizard steps, results, detail, terminals, installation)
- app/: Sidebar and navigation
- styles/: Palette and reusable cards

Usage:
    streamlit run connector_guide/streamlit_app.py
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
