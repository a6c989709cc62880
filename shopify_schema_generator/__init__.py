"""Core logic for the Shopify Schema Generator.

The Gradio UI lives in `app.py`. This package contains functions that:
- derive section handles from names
- edit the field list
- build the section schema and locale documents
- persist named projects in a key-value store
"""
