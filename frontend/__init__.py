"""Streamlit search page for Materials Project oxidation states."""
