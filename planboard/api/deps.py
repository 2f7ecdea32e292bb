"""
API Dependencies

The HTTP adapter serves a single planner session stored on ``app.state``.
"""

from typing import Annotated

from fastapi import Depends, Request

from planboard.application import PlanningBoard


def get_board(request: Request) -> PlanningBoard:
    return request.app.state.board


BoardDep = Annotated[PlanningBoard, Depends(get_board)]
