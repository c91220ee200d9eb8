from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    # Liveness only: answering at all means the process is up.
    return {"status": "ok"}
