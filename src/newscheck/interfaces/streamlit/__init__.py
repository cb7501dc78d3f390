"""Streamlit web interface."""
