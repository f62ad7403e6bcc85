"""
Health check API route
"""

from datetime import datetime
from fastapi import APIRouter, HTTPException, Depends
from services.people_service import PeopleService, get_people_service

router = APIRouter()

@router.get("/health")
async def health_check(people: PeopleService = Depends(get_people_service)):
    """
    Health check - reports unhealthy only when the store cannot be reached
    """
    if not await people.is_available():
        raise HTTPException(status_code=503, detail="Health check failed: database not reachable")

    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "database": "connected"
    }
