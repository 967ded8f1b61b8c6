# ABOUTME: Web package for the timeline JSON API.
# ABOUTME: Exposes the FastAPI application factory.
