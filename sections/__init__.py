"""Streamlit section renderers for the portfolio page."""
