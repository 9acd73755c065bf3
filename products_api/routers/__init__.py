"""Routers package — HTTP endpoint definitions.

Files:
  products.py  — Product CRUD + filtered listing (/api/products)

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to products_api/services/.
"""
