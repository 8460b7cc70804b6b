"""
Core functionality for the Video Summary AI application.

This package contains modules for fetching transcripts, analyzing them
with an LLM and parsing the model's response.
"""
