"""
auth — User authentication module.

Provides:
  • JWT token creation & verification (HS256)
  • Password hashing (bcrypt)
  • Register / Login API routes
  • ``get_current_user_id`` FastAPI dependency
"""
