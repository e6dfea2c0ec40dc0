"""
Infrastructure layer: FastAPI routers, SQLAlchemy repositories and the
generation engines implementing the application protocols.
"""
