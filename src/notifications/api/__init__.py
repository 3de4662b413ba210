from notifications.api.routes import router as summary_router

__all__ = ["summary_router"]
