"""Admin API routes — everything here requires the admin role."""

from fastapi import APIRouter, Depends

from eventplanner.interfaces.api.deps import require_admin

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


@router.get("/test")
def admin_test():
    return {"message": "Admin route working"}
