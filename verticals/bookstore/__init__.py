"""Bookstore vertical.

An in-memory bookstore with three kinds of book:
- Paper books with stock, shipped on purchase
- Ebooks, emailed one copy at a time
- Demo copies, never for sale

Exposed through a console demo, a FastAPI router and an MCP server.
"""
