"""Pydantic schemas package.

Folder intent:
  common.py   — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  product.py  — Product request DTOs (with validation messages) and response model
"""
