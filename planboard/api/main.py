from fastapi import APIRouter

from planboard.api.routes import planning_board

api_router = APIRouter()

# Planning board routes - drag-and-drop production scheduling
api_router.include_router(planning_board.router)
