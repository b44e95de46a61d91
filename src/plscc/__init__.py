"""
PLS Command Center - Post-Legislative Scrutiny workbench.

Relay service for model-backed legislation extraction and chat, a
regex-based extraction fallback, document ingestion, and the wizard
domain behind the Streamlit shell.
"""

__version__ = "1.0.0"
