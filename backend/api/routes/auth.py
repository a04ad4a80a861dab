"""
Student authentication routes.
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_database
from api.errors import PROBLEM_RESPONSES, problem_response
from api.models.requests import LoginRequest
from core.database import Database
from models.student_models import Student
from services.portal.auth import login as login_student
from services.portal.results import Err

router = APIRouter()


@router.post("/login", response_model=Student, responses=PROBLEM_RESPONSES)
async def login(request: LoginRequest, database: Database = Depends(get_database)):
    """
    Return the full student record when code and password match.
    """
    result = await login_student(database, request.student_code, request.password)
    if isinstance(result, Err):
        return problem_response(result)
    return result.value
