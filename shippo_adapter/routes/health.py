from fastapi import APIRouter, Depends

from shippo_adapter.dependencies import get_shippo_client
from shippo_adapter.services.shippo.client import ShippoClient, check_credentials

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Basic health check"""
    return {"status": "healthy", "service": "Shippo Adapter"}


@router.get("/health/shippo")
async def shippo_health(client: ShippoClient = Depends(get_shippo_client)):
    """Check the Shippo credential with GET /addresses?results=1"""
    ok, message = await check_credentials(client)
    return {
        "status": "healthy" if ok else "unhealthy",
        "shippo": "connected" if ok else "error",
        "message": message,
    }
