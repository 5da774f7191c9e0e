"""
auth — User authentication module.

Provides:
  • Signed session token creation & verification
  • Password hashing (bcrypt)
  • Register / Login API routes
  • ``get_current_user`` FastAPI dependency (the authentication gate)
"""
