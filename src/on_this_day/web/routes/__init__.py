# ABOUTME: Routes module initialization.
# ABOUTME: Exports all route modules for FastAPI app.

from on_this_day.web.routes import api, moderation

__all__ = ["api", "moderation"]
