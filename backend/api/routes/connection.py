"""
MongoDB connectivity check route.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.dependencies import get_database
from api.errors import PROBLEM_RESPONSES, problem_response
from core.database import Database
from services.portal.connection import check_connection
from services.portal.results import Err

router = APIRouter()


@router.get(
    "/test-mongo-connection",
    response_class=PlainTextResponse,
    responses={500: PROBLEM_RESPONSES[500]},
)
async def test_mongo_connection(database: Database = Depends(get_database)):
    """Report how many students are stored."""
    result = await check_connection(database)
    if isinstance(result, Err):
        return problem_response(result)
    return PlainTextResponse(result.value)
