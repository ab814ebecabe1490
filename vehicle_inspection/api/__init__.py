"""API package."""
from vehicle_inspection.api.question_routes import question_router
from vehicle_inspection.api.routes import inspection_router

__all__ = ["inspection_router", "question_router"]
