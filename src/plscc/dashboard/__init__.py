"""
Streamlit shell for the PLS Command Center.

Usage:
    streamlit run src/plscc/dashboard/app.py
"""
